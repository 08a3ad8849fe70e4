"""
Errores de la calculadora.

Todas las operaciones del núcleo validan su entrada antes de modificar el
estado, así que cualquiera de estas excepciones garantiza que el estado
de la calculadora quedó intacto.
"""


class CalculatorError(Exception):
    """Error base de la calculadora."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class InvalidInputError(CalculatorError):
    """Token de dígito/punto no reconocido."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Entrada no válida: {token!r}")


class InvalidOperatorError(CalculatorError):
    """Token de operador (unario o binario) no reconocido."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Operador no válido: {token!r}")


class InvalidStateError(CalculatorError):
    """El estado no tiene nada que mostrar y no hay valor por defecto."""
