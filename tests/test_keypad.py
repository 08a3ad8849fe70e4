"""Tests de la distribución del teclado."""

import pytest

from config.settings import CalculatorConfig
from ui.keypad import (
    COLS,
    KEYS,
    KEYS_BY_LABEL,
    ROWS,
    KeyKind,
    ascii_label,
    key_at,
    key_for_keycode,
    key_rect,
)


def test_grid_is_fully_covered():
    cells = set()
    for key in KEYS:
        for offset in range(key.span):
            cell = (key.row, key.col + offset)
            assert cell not in cells
            cells.add(cell)
    assert len(cells) == ROWS * COLS


def test_key_kinds():
    assert KEYS_BY_LABEL["AC"].kind is KeyKind.CLEAR
    assert KEYS_BY_LABEL["="].kind is KeyKind.EQUALS
    assert KEYS_BY_LABEL["%"].kind is KeyKind.UNARY
    assert KEYS_BY_LABEL["÷"].kind is KeyKind.BINARY
    assert KEYS_BY_LABEL["."].kind is KeyKind.DIGIT
    assert sum(1 for k in KEYS if k.kind is KeyKind.DIGIT) == 11


def test_ascii_labels():
    assert ascii_label(KEYS_BY_LABEL["×"]) == "x"
    assert ascii_label(KEYS_BY_LABEL["+/–"]) == "+/-"
    assert ascii_label(KEYS_BY_LABEL["7"]) == "7"
    assert all(ascii_label(k).isascii() for k in KEYS)


def test_key_rect_inside_area():
    area = (0, 100, 400, 500)
    x, y, w, h = key_rect(KEYS_BY_LABEL["AC"], area)
    assert (x, y, w, h) == (0, 100, 100, 100)
    x, y, w, h = key_rect(KEYS_BY_LABEL["0"], area)
    assert (x, y, w, h) == (0, 500, 200, 100)


def test_key_at_hits_center_of_every_key():
    config = CalculatorConfig()
    area = config.get_keypad_area()
    for key in KEYS:
        x, y, w, h = key_rect(key, area, config.key_gap)
        assert key_at(x + w // 2, y + h // 2, area, config.key_gap) == key


def test_key_at_outside_keypad():
    config = CalculatorConfig()
    area = config.get_keypad_area()
    assert key_at(10, 10, area) is None
    assert key_at(-1, config.height - 1, area) is None


@pytest.mark.parametrize("char, label", [
    ("5", "5"),
    (".", "."),
    ("+", "+"),
    ("-", "–"),
    ("*", "×"),
    ("/", "÷"),
    ("%", "%"),
    ("n", "+/–"),
    ("=", "="),
    ("c", "AC"),
])
def test_keyboard_bindings(char, label):
    assert key_for_keycode(ord(char)).label == label


def test_enter_evaluates_and_unknown_key_is_ignored():
    assert key_for_keycode(13).kind is KeyKind.EQUALS
    assert key_for_keycode(ord("z")) is None
