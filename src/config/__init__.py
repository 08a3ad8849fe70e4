"""
Módulo de configuración de la calculadora.
Contiene la clase de configuración del núcleo y de la ventana.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']
