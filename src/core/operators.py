"""
Operadores de la calculadora y utilidades numéricas.

Este módulo define las enumeraciones cerradas de operadores binarios
(+, -, ×, ÷) y unarios (+/-, %), y las funciones puras para convertir
operandos de texto a número y números a texto de display.
"""

import math
from decimal import Decimal
from enum import Enum

from .errors import InvalidOperatorError


# ============================================================================
# FUNCIONES NUMÉRICAS
# ============================================================================
def _add(a, b):
    return a + b


def _subtract(a, b):
    return a - b


def _multiply(a, b):
    return a * b


def _divide(a, b):
    """
    División con semántica IEEE-754.

    Python lanza ZeroDivisionError al dividir floats entre cero; una
    calculadora de bolsillo muestra infinito o NaN en su lugar:
        - x / 0 con x != 0 → ±inf (signo según dividendo y divisor)
        - 0 / 0 y nan / 0 → nan
    """
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# ============================================================================
# CLASE: BinaryOperator
# Propósito: Operadores de dos operandos con su función asociada
# Responsabilidades:
#   - Resolver tokens de botón/teclado ("+", "–", "×", "÷", ...) una sola vez
#   - Aplicar la función numérica sobre dos floats
# ============================================================================
class BinaryOperator(Enum):
    """Operador binario. El valor de cada miembro es su símbolo ASCII."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_token(cls, token):
        """
        Resuelve un token de operador binario.

        Args:
            token (str): Símbolo del botón o tecla (ej: "+", "–", "×", "÷", "/")

        Returns:
            BinaryOperator: Operador correspondiente

        Raises:
            InvalidOperatorError: Si el token no es un operador binario
        """
        try:
            return _BINARY_TOKENS[token]
        except (KeyError, TypeError):
            raise InvalidOperatorError(token) from None

    @property
    def symbol(self):
        return self.value

    def apply(self, a, b):
        """Aplica el operador a dos números."""
        return _BINARY_FUNCTIONS[self](a, b)


_BINARY_FUNCTIONS = {
    BinaryOperator.ADD: _add,
    BinaryOperator.SUBTRACT: _subtract,
    BinaryOperator.MULTIPLY: _multiply,
    BinaryOperator.DIVIDE: _divide,
}

# Alias aceptados: símbolos ASCII del teclado y símbolos tipográficos de los botones
_BINARY_TOKENS = {
    "+": BinaryOperator.ADD,
    "-": BinaryOperator.SUBTRACT,
    "–": BinaryOperator.SUBTRACT,    # Guion medio (botón "–")
    "*": BinaryOperator.MULTIPLY,
    "×": BinaryOperator.MULTIPLY,
    "/": BinaryOperator.DIVIDE,
    "÷": BinaryOperator.DIVIDE,
}


# ============================================================================
# CLASE: UnaryOperator
# Propósito: Operadores de un operando (cambio de signo y porcentaje)
# ============================================================================
class UnaryOperator(Enum):
    NEGATE = "+/-"
    PERCENT = "%"

    @classmethod
    def from_token(cls, token):
        """
        Resuelve un token de operador unario.

        Raises:
            InvalidOperatorError: Si el token no es "+/-", "+/–", "±" ni "%"
        """
        try:
            return _UNARY_TOKENS[token]
        except (KeyError, TypeError):
            raise InvalidOperatorError(token) from None


_UNARY_TOKENS = {
    "+/-": UnaryOperator.NEGATE,
    "+/–": UnaryOperator.NEGATE,
    "±": UnaryOperator.NEGATE,
    "%": UnaryOperator.PERCENT,
}


# ============================================================================
# CONVERSIONES TEXTO ↔ NÚMERO
# ============================================================================
def parse_operand(text):
    """
    Interpreta numéricamente un operando en texto.

    Args:
        text (str): Operando tal como se escribió (ej: "12", "-0.5", "3.")

    Returns:
        float: Valor numérico. Los operandos incompletos ("", "-", ".", "-.")
               valen 0.
    """
    if text in ("", "-", ".", "-."):
        return 0.0
    return float(text)


def format_number(value):
    """
    Formatea un número para el display.

    Returns:
        str: Resultado formateado
            - 8.0 → "8" (enteros sin decimales)
            - 0.02 → "0.02"
            - 1e-05 → "0.00001" (sin notación exponencial, el texto se
              puede seguir editando como operando)
            - inf / -inf / nan → "inf" / "-inf" / "nan"
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def toggle_sign(text):
    """Añade o quita el signo "-" inicial sin tocar el resto de dígitos."""
    if text.startswith("-"):
        return text[1:]
    return "-" + text
