"""Tests de operadores y conversiones numéricas."""

import math

import pytest

from core.errors import CalculatorError, InvalidOperatorError
from core.operators import (
    BinaryOperator,
    UnaryOperator,
    format_number,
    parse_operand,
    toggle_sign,
)


class TestBinaryOperator:
    @pytest.mark.parametrize("token, expected", [
        ("+", BinaryOperator.ADD),
        ("-", BinaryOperator.SUBTRACT),
        ("–", BinaryOperator.SUBTRACT),
        ("*", BinaryOperator.MULTIPLY),
        ("×", BinaryOperator.MULTIPLY),
        ("/", BinaryOperator.DIVIDE),
        ("÷", BinaryOperator.DIVIDE),
    ])
    def test_from_token(self, token, expected):
        assert BinaryOperator.from_token(token) is expected

    def test_unknown_token(self):
        with pytest.raises(InvalidOperatorError) as exc_info:
            BinaryOperator.from_token("^")
        assert exc_info.value.token == "^"
        assert isinstance(exc_info.value, CalculatorError)

    def test_apply(self):
        assert BinaryOperator.ADD.apply(2.0, 3.0) == 5.0
        assert BinaryOperator.SUBTRACT.apply(2.0, 3.0) == -1.0
        assert BinaryOperator.MULTIPLY.apply(2.0, 3.0) == 6.0
        assert BinaryOperator.DIVIDE.apply(3.0, 2.0) == 1.5

    def test_divide_by_zero_follows_ieee(self):
        assert BinaryOperator.DIVIDE.apply(1.0, 0.0) == math.inf
        assert BinaryOperator.DIVIDE.apply(-1.0, 0.0) == -math.inf
        assert BinaryOperator.DIVIDE.apply(1.0, -0.0) == -math.inf
        assert math.isnan(BinaryOperator.DIVIDE.apply(0.0, 0.0))


class TestUnaryOperator:
    @pytest.mark.parametrize("token", ["+/-", "+/–", "±"])
    def test_negate_tokens(self, token):
        assert UnaryOperator.from_token(token) is UnaryOperator.NEGATE

    def test_percent_token(self):
        assert UnaryOperator.from_token("%") is UnaryOperator.PERCENT

    def test_binary_symbol_is_not_unary(self):
        with pytest.raises(InvalidOperatorError):
            UnaryOperator.from_token("+")


@pytest.mark.parametrize("value, expected", [
    (8.0, "8"),
    (-8.0, "-8"),
    (-0.0, "0"),
    (0.02, "0.02"),
    (3.5, "3.5"),
    (1e-05, "0.00001"),
    (-2.5e-07, "-0.00000025"),
    (1e20, "100000000000000000000"),
    (math.inf, "inf"),
    (-math.inf, "-inf"),
    (math.nan, "nan"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("text, expected", [
    ("12", 12.0),
    ("-0.5", -0.5),
    ("3.", 3.0),
    ("007", 7.0),
    ("", 0.0),
    ("-", 0.0),
    (".", 0.0),
    ("-.", 0.0),
])
def test_parse_operand(text, expected):
    assert parse_operand(text) == expected


def test_toggle_sign():
    assert toggle_sign("12") == "-12"
    assert toggle_sign("-12") == "12"
    assert toggle_sign(toggle_sign("0.50")) == "0.50"
