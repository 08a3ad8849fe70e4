"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos visuales.
"""

import cv2
import numpy as np

from config.settings import CalculatorConfig

from .keypad import KEYS, KeyKind, ascii_label, key_rect


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display: expresión pendiente (arriba) y número/resultado (grande)
        2. Teclado: rejilla de botones 5x4
        3. Feedback: mensajes temporales de error/confirmación
    """

    def __init__(self, config=None):
        """
        Inicializa el renderizador.

        Args:
            config (CalculatorConfig): Configuración de ventana y colores (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.width = self.config.width
        self.height = self.config.height
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)    # Color del feedback

    def new_frame(self):
        """Crea un lienzo vacío del tamaño de la ventana (BGR, uint8)."""
        return np.full((self.height, self.width, 3), self.config.background_color, dtype=np.uint8)

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto la de la configuración)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration if duration is not None else self.config.feedback_duration

    def draw_display(self, img, text, expression="", is_result=False):
        """
        Dibuja el display de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            text (str): Número o resultado a mostrar
            expression (str): Expresión pendiente (ej: "5 +")
            is_result (bool): True si text es un resultado evaluado

        Componentes:
            1. Fondo del display
            2. Expresión pendiente alineada a la derecha (fuente pequeña)
            3. Número principal alineado a la derecha

        El texto se dibuja dentro del margen display_inset y la fuente se
        reduce hasta que el número cabe en el ancho disponible.
        """
        inset = self.config.display_inset
        x, y, w, h = 0, 0, self.width, self.config.display_height
        cv2.rectangle(img, (x, y), (x + w - 1, y + h - 1), self.config.display_color, -1)

        max_w = w - 2 * inset

        if expression:
            expr_scale = 0.7
            (ew, eh), _ = cv2.getTextSize(expression, cv2.FONT_HERSHEY_SIMPLEX, expr_scale, 1)
            cv2.putText(img, expression, (x + w - inset - min(ew, max_w), y + inset + eh),
                        cv2.FONT_HERSHEY_SIMPLEX, expr_scale, self.config.expression_color, 1)

        # Ajustar tamaño de fuente según longitud
        font_scale, thickness = self.fit_font_scale(text, max_w)
        (tw, _), baseline = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, font_scale, thickness)

        color = self.config.result_color if is_result else self.config.text_color
        cv2.putText(img, text, (x + w - inset - tw, y + h - inset - baseline),
                    cv2.FONT_HERSHEY_DUPLEX, font_scale, color, thickness)

    def fit_font_scale(self, text, max_width, start=2.5, minimum=0.6):
        """
        Busca la mayor escala de fuente con la que el texto cabe en max_width.

        Returns:
            tuple: (font_scale, thickness)
        """
        scale = start
        while scale > minimum:
            thickness = max(1, int(scale * 1.2))
            tw = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, scale, thickness)[0][0]
            if tw <= max_width:
                return scale, thickness
            scale = round(scale - 0.1, 2)
        return minimum, 1

    def draw_keypad(self, img, highlighted=None):
        """
        Dibuja la rejilla de botones.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            highlighted (Key): Botón recién pulsado, se dibuja más claro

        Colores:
            - Gris oscuro: dígitos y punto
            - Gris claro: AC, +/– y %
            - Naranja: operadores binarios e igual
        """
        area = self.config.get_keypad_area()
        for key in KEYS:
            x, y, w, h = key_rect(key, area, self.config.key_gap)
            color = self.key_color(key)
            if highlighted is not None and key == highlighted:
                color = tuple(min(255, c + 60) for c in color)
            cv2.rectangle(img, (x, y), (x + w, y + h), color, -1)

            label = ascii_label(key)
            (lw, lh), _ = cv2.getTextSize(label, cv2.FONT_HERSHEY_SIMPLEX, 1.0, 2)
            label_color = (0, 0, 0) if key.kind in (KeyKind.CLEAR, KeyKind.UNARY) else (255, 255, 255)
            cv2.putText(img, label, (x + (w - lw) // 2, y + (h + lh) // 2),
                        cv2.FONT_HERSHEY_SIMPLEX, 1.0, label_color, 2)

    def key_color(self, key):
        if key.kind in (KeyKind.BINARY, KeyKind.EQUALS):
            return self.config.operator_key_color
        if key.kind in (KeyKind.CLEAR, KeyKind.UNARY):
            return self.config.function_key_color
        return self.config.digit_key_color

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la esquina superior izquierda del display.

        Efecto:
            - Desaparece con fade-out usando el color multiplicado por alpha
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            # Calcular alpha para fade-out suave
            alpha = min(self.feedback_timer / 20.0, 1.0)

            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, self.feedback_msg,
                        (self.config.display_inset, self.config.display_inset + 14),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.5, color, 1)
