"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados, los operadores y los errores.
"""

from .calculator import Calculator, EnteringFirst, EnteringSecond, ShowingResult
from .errors import (
    CalculatorError,
    InvalidInputError,
    InvalidOperatorError,
    InvalidStateError,
)
from .operators import BinaryOperator, UnaryOperator, format_number, parse_operand

__all__ = [
    'Calculator', 'EnteringFirst', 'EnteringSecond', 'ShowingResult',
    'CalculatorError', 'InvalidInputError', 'InvalidOperatorError', 'InvalidStateError',
    'BinaryOperator', 'UnaryOperator', 'format_number', 'parse_operand',
]
