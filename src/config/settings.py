"""
Configuración de la calculadora.

Este módulo centraliza las preferencias del núcleo (texto por defecto,
tratamiento del punto inicial) y de la ventana (tamaño, márgenes, colores).
"""


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración centralizada de la calculadora
# Responsabilidades:
#   - Definir el texto por defecto del display y la política del punto inicial
#   - Definir geometría de la ventana, del display y del teclado
#   - Definir colores (BGR, formato de OpenCV) y duración del feedback
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora de teclado.

    Cualquier atributo puede sobrescribirse por keyword:
        CalculatorConfig(default_display=None, width=480)

    Raises:
        AttributeError: Si se pasa una opción desconocida
    """

    def __init__(self, **overrides):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # NÚCLEO
        # ====================================================================
        self.default_display = "0"          # Texto cuando no hay nada que mostrar (None = sin defecto)
        self.pad_leading_point = True       # "." como primer carácter → "0."

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Calculadora"
        self.width = 400                    # Ancho de la ventana en píxeles
        self.height = 600                   # Alto de la ventana en píxeles
        self.display_height = 140           # Alto del panel del display
        self.display_inset = 12             # Margen interior del texto del display
        self.key_gap = 2                    # Separación entre botones

        # ====================================================================
        # COLORES (BGR)
        # ====================================================================
        self.background_color = (30, 30, 30)
        self.display_color = (20, 20, 20)
        self.text_color = (255, 255, 255)
        self.result_color = (100, 255, 100)     # Verde (resultado)
        self.expression_color = (180, 180, 180)
        self.digit_key_color = (80, 80, 80)
        self.function_key_color = (165, 165, 165)
        self.operator_key_color = (10, 150, 255)    # Naranja
        self.error_color = (50, 50, 255)            # Rojo

        # ====================================================================
        # FEEDBACK
        # ====================================================================
        self.feedback_duration = 40         # Frames (~1.3 s a 30 fps)
        self.frame_delay_ms = 30            # Espera de cv2.waitKey por iteración

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Opción de configuración desconocida: {name}")
            setattr(self, name, value)

    def get_keypad_area(self):
        """
        Calcula el rectángulo disponible para el teclado.

        Returns:
            tuple: (x, y, w, h) debajo del display
        """
        return 0, self.display_height, self.width, self.height - self.display_height
