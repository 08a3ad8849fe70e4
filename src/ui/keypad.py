"""
Distribución del teclado de la calculadora.

Este módulo define los botones (etiqueta, tipo, posición en la rejilla),
calcula sus rectángulos en píxeles y traduce clics y teclas a botones.
"""

from dataclasses import dataclass
from enum import Enum


class KeyKind(Enum):
    DIGIT = "digit"         # 0-9 y "."
    UNARY = "unary"         # +/– y %
    BINARY = "binary"       # + – × ÷
    CLEAR = "clear"         # AC
    EQUALS = "equals"       # =


@dataclass(frozen=True)
class Key:
    """
    Botón del teclado.

    Atributos:
        label: Texto del botón ("7", "÷", "AC", ...). Es también el token
               que se envía a la calculadora.
        kind: Tipo de evento que genera
        row, col: Posición en la rejilla (0-based)
        span: Columnas que ocupa (el "0" ocupa dos)
    """

    label: str
    kind: KeyKind
    row: int
    col: int
    span: int = 1


# ============================================================================
# REJILLA DE BOTONES (5 filas x 4 columnas)
#   AC  +/–  %   ÷
#   7   8    9   ×
#   4   5    6   –
#   1   2    3   +
#   0        .   =
# ============================================================================
ROWS = 5
COLS = 4

KEYS = (
    Key("AC", KeyKind.CLEAR, 0, 0),
    Key("+/–", KeyKind.UNARY, 0, 1),
    Key("%", KeyKind.UNARY, 0, 2),
    Key("÷", KeyKind.BINARY, 0, 3),
    Key("7", KeyKind.DIGIT, 1, 0),
    Key("8", KeyKind.DIGIT, 1, 1),
    Key("9", KeyKind.DIGIT, 1, 2),
    Key("×", KeyKind.BINARY, 1, 3),
    Key("4", KeyKind.DIGIT, 2, 0),
    Key("5", KeyKind.DIGIT, 2, 1),
    Key("6", KeyKind.DIGIT, 2, 2),
    Key("–", KeyKind.BINARY, 2, 3),
    Key("1", KeyKind.DIGIT, 3, 0),
    Key("2", KeyKind.DIGIT, 3, 1),
    Key("3", KeyKind.DIGIT, 3, 2),
    Key("+", KeyKind.BINARY, 3, 3),
    Key("0", KeyKind.DIGIT, 4, 0, span=2),
    Key(".", KeyKind.DIGIT, 4, 2),
    Key("=", KeyKind.EQUALS, 4, 3),
)

KEYS_BY_LABEL = {key.label: key for key in KEYS}

# Las fuentes Hershey de OpenCV solo dibujan ASCII
ASCII_LABELS = {
    "+/–": "+/-",
    "÷": "/",
    "×": "x",
    "–": "-",
}

# Teclado físico → etiqueta del botón
KEYBOARD_BINDINGS = {
    **{ord(d): d for d in "0123456789"},
    ord("."): ".",
    ord(","): ".",
    ord("+"): "+",
    ord("-"): "–",
    ord("*"): "×",
    ord("x"): "×",
    ord("/"): "÷",
    ord("%"): "%",
    ord("n"): "+/–",
    ord("="): "=",
    13: "=",        # Enter
    10: "=",        # Enter (Linux)
    ord("c"): "AC",
    8: "AC",        # Backspace
    127: "AC",      # Delete (macOS)
}


def ascii_label(key):
    """Etiqueta dibujable con fuentes Hershey."""
    return ASCII_LABELS.get(key.label, key.label)


def key_rect(key, area, gap=0):
    """
    Calcula el rectángulo de un botón dentro del área del teclado.

    Args:
        key (Key): Botón
        area (tuple): (x, y, w, h) del área del teclado
        gap (int): Separación entre botones en píxeles

    Returns:
        tuple: (x, y, w, h) del botón
    """
    ax, ay, aw, ah = area
    cell_w = aw / COLS
    cell_h = ah / ROWS
    x = int(ax + key.col * cell_w) + gap
    y = int(ay + key.row * cell_h) + gap
    w = int(cell_w * key.span) - 2 * gap
    h = int(cell_h) - 2 * gap
    return x, y, w, h


def key_at(px, py, area, gap=0):
    """
    Busca el botón bajo un punto (clic del ratón).

    Returns:
        Key: Botón bajo el punto, o None si el punto cae en un hueco o fuera
    """
    for key in KEYS:
        x, y, w, h = key_rect(key, area, gap)
        if x <= px < x + w and y <= py < y + h:
            return key
    return None


def key_for_keycode(keycode):
    """
    Traduce un código de cv2.waitKey a un botón.

    Returns:
        Key: Botón asociado, o None si la tecla no tiene asignación
    """
    label = KEYBOARD_BINDINGS.get(keycode)
    if label is None:
        return None
    return KEYS_BY_LABEL[label]
