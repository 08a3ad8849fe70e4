"""
Módulo de interfaz de usuario.
Contiene el renderizador de UI y la distribución del teclado.
"""

from .keypad import KEYS, Key, KeyKind, key_at, key_for_keycode
from .renderer import UIRenderer

__all__ = ['UIRenderer', 'KEYS', 'Key', 'KeyKind', 'key_at', 'key_for_keycode']
