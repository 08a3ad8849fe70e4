import pytest

from config.settings import CalculatorConfig
from core.calculator import Calculator


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def calc(config):
    return Calculator(config)


@pytest.fixture
def enter():
    """Pulsa cada carácter del texto como dígito/punto."""
    def _enter(calc, text):
        for ch in text:
            calc.submit_digit_or_point(ch)
    return _enter
