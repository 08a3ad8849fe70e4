"""
Lógica de calculadora aritmética básica.

Este módulo contiene la clase Calculator: una máquina de estados de un solo
acumulador que opera con dos operandos a la vez (primer número, operador,
segundo número, igual). No evalúa expresiones ni aplica precedencia.
"""

from dataclasses import dataclass, replace
from typing import Optional

from config.settings import CalculatorConfig

from .errors import InvalidInputError, InvalidStateError
from .operators import (
    BinaryOperator,
    UnaryOperator,
    format_number,
    parse_operand,
    toggle_sign,
)


DIGIT_TOKENS = frozenset("0123456789.")
POINT = "."


# ============================================================================
# ESTADOS
# Cada estado lleva solo los campos que le corresponden, así que no existen
# combinaciones inválidas (p. ej. segundo operando sin operador pendiente).
# ============================================================================
@dataclass(frozen=True)
class EnteringFirst:
    """Escribiendo el primer operando."""

    first: Optional[str] = None


@dataclass(frozen=True)
class EnteringSecond:
    """Operador elegido; escribiendo el segundo operando."""

    first: Optional[str]
    operator: BinaryOperator
    second: Optional[str] = None


@dataclass(frozen=True)
class ShowingResult:
    """Mostrando el resultado de una evaluación."""

    result: float


# ============================================================================
# CLASE: Calculator
# Propósito: Lógica de calculadora aritmética básica
# Responsabilidades:
#   - Construir operandos dígito por dígito
#   - Guardar el operador binario pendiente
#   - Evaluar primer operando <op> segundo operando
#   - Encadenar cálculos a partir del resultado anterior
# ============================================================================
class Calculator:
    """
    Máquina de estados de la calculadora.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en el primer operando
        2. Usuario elige operador → se pasa a escribir el segundo operando
        3. Usuario ingresa dígitos → se acumulan en el segundo operando
        4. Usuario presiona = → se muestra el resultado

    Estados:
        - EnteringFirst: escribiendo el primer operando
        - EnteringSecond: operador pendiente, escribiendo el segundo
        - ShowingResult: resultado de la última evaluación

    Toda operación valida su entrada antes de cambiar de estado: si lanza
    CalculatorError, el estado queda igual que antes de la llamada.
    """

    def __init__(self, config=None):
        """
        Inicializa calculadora en estado vacío.

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.state = EnteringFirst()

    # ========================================================================
    # CONSULTAS
    # ========================================================================
    @property
    def has_result(self):
        return isinstance(self.state, ShowingResult)

    def get_display(self):
        """
        Obtiene el texto a mostrar en el display principal.

        Returns:
            str: Primer valor disponible según prioridad

        Prioridad:
            1. Resultado (entero sin decimales si no tiene parte fraccionaria)
            2. Segundo operando
            3. Primer operando
            4. Texto por defecto de la configuración ("0")

        Raises:
            InvalidStateError: Si no hay nada que mostrar ni texto por defecto
        """
        state = self.state
        if isinstance(state, ShowingResult):
            return format_number(state.result)
        if isinstance(state, EnteringSecond) and state.second is not None:
            return state.second
        if state.first is not None:
            return state.first
        if self.config.default_display is None:
            raise InvalidStateError("No hay valor que mostrar ni texto por defecto")
        return self.config.default_display

    def get_expression(self):
        """
        Obtiene la expresión pendiente para el display secundario.

        Returns:
            str: Ej: "5 +" o "5 + 3"; cadena vacía si no hay operador pendiente
                 o si falta el primer operando (= no evaluaría nada)
        """
        state = self.state
        if not isinstance(state, EnteringSecond) or state.first is None:
            return ""
        expr = f"{state.first} {state.operator.symbol}"
        if state.second is not None:
            expr += f" {state.second}"
        return expr

    # ========================================================================
    # EVENTOS
    # ========================================================================
    def submit_digit_or_point(self, token):
        """
        Añade un dígito o el punto decimal al operando activo.

        Args:
            token (str): "0".."9" o "."

        Raises:
            InvalidInputError: Si el token no es un dígito ni "."

        Comportamiento:
            - Si hay resultado: nuevo cálculo cuyo primer operando es el
              resultado anterior (si es finito)
            - Operando vacío: se inicializa con el token ("." → "0." si
              pad_leading_point está activo)
            - Un segundo "." en el mismo operando se ignora
        """
        if not isinstance(token, str) or token not in DIGIT_TOKENS:
            raise InvalidInputError(token)

        if isinstance(self.state, ShowingResult):
            self.state = EnteringFirst(self._result_as_operand())

        current = self._active_operand()
        self._set_active_operand(self._append(current, token))

    def submit_unary_operator(self, op):
        """
        Aplica un operador unario (+/- o %) al valor activo.

        Args:
            op (str): "+/-", "+/–", "±" o "%"

        Raises:
            InvalidOperatorError: Si el operador no es unario

        Prioridad del valor afectado:
            1. Segundo operando
            2. Primer operando
            3. Resultado evaluado
        Sin ningún valor no hace nada.
        """
        operator = UnaryOperator.from_token(op)
        state = self.state

        if isinstance(state, ShowingResult):
            if operator is UnaryOperator.NEGATE:
                self.state = ShowingResult(state.result * -1)
            else:
                self.state = ShowingResult(state.result / 100)
            return

        if isinstance(state, EnteringSecond) and state.second is not None:
            self.state = replace(state, second=self._apply_unary(operator, state.second))
        elif state.first is not None:
            self.state = replace(state, first=self._apply_unary(operator, state.first))

    def submit_binary_operator(self, op):
        """
        Elige el operador binario pendiente.

        Args:
            op (str): "+", "-"/"–", "*"/"×" o "/"/"÷"

        Raises:
            InvalidOperatorError: Si el operador no es binario

        Comportamiento:
            1. Si ya hay segundo operando: se evalúa el cálculo pendiente
            2. Si hay resultado: pasa a ser el primer operando del nuevo cálculo
            3. Se guarda el operador (reemplaza al anterior)

        Ejemplo de flujo:
            "5" → "+" → "3" → "×"  ⇒  primer operando "8", operador ×
        """
        operator = BinaryOperator.from_token(op)

        if isinstance(self.state, EnteringSecond) and self.state.second is not None:
            self.evaluate()

        state = self.state
        if isinstance(state, ShowingResult):
            self.state = EnteringSecond(format_number(state.result), operator)
        elif isinstance(state, EnteringSecond):
            self.state = replace(state, operator=operator)
        else:
            self.state = EnteringSecond(state.first, operator)

    def evaluate(self):
        """
        Evalúa primer operando <operador> segundo operando.

        Solo actúa si existen ambos operandos y el operador; en otro caso no
        hace nada (evaluar dos veces seguidas es idempotente).

        La división entre cero no es un error: produce inf, -inf o nan.
        """
        state = self.state
        if not isinstance(state, EnteringSecond):
            return
        if state.first is None or state.second is None:
            return
        result = state.operator.apply(parse_operand(state.first), parse_operand(state.second))
        self.state = ShowingResult(result)

    def clear(self):
        """
        Borra TODO el estado de la calculadora (AC).

        Equivalente a una calculadora recién creada.
        """
        self.state = EnteringFirst()

    # ========================================================================
    # AUXILIARES
    # ========================================================================
    def _active_operand(self):
        state = self.state
        if isinstance(state, EnteringSecond):
            return state.second
        return state.first

    def _set_active_operand(self, text):
        state = self.state
        if isinstance(state, EnteringSecond):
            self.state = replace(state, second=text)
        else:
            self.state = replace(state, first=text)

    def _append(self, current, token):
        if current is None:
            if token == POINT and self.config.pad_leading_point:
                return "0."
            return token
        if token == POINT and POINT in current:
            return current
        return current + token

    def _result_as_operand(self):
        text = format_number(self.state.result)
        # inf/nan no sirven como base para seguir escribiendo dígitos
        if text in ("inf", "-inf", "nan"):
            return None
        return text

    @staticmethod
    def _apply_unary(operator, text):
        if operator is UnaryOperator.NEGATE:
            return toggle_sign(text)
        return format_number(parse_operand(text) / 100)
