"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import cv2

from config.settings import CalculatorConfig
from core.calculator import Calculator
from core.errors import CalculatorError, InvalidStateError
from ui.keypad import KeyKind, key_at, key_for_keycode
from ui.renderer import UIRenderer


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - Calculator: Lógica aritmética y estado
        - UIRenderer: Renderizado de display y teclado
        - CalculatorApp: Traduce clics/teclas a eventos y ejecuta el loop

    Tras cada evento se vuelve a leer el texto del display de la
    calculadora; la interfaz nunca calcula nada por su cuenta.
    """

    def __init__(self, config=None, calculator=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Configuración (opcional)
            calculator (Calculator): Calculadora a controlar (opcional)

        La ventana no se abre aquí sino en run().
        """
        self.config = config if config else CalculatorConfig()
        self.calc = calculator if calculator else Calculator(self.config)
        self.ui = UIRenderer(self.config)

        self.display_text = ""
        self.refresh_display()
        self.highlighted = None         # Último botón pulsado
        self.highlight_timer = 0        # Frames restantes de resaltado
        self.running = False

    def press(self, key):
        """
        Procesa un botón pulsado y actualiza el display.

        Args:
            key (Key): Botón del teclado

        Returns:
            bool: True si la calculadora aceptó el evento, False si lo rechazó

        Errores:
            CalculatorError se informa por consola y en pantalla; el estado
            de la calculadora no cambia.
        """
        self.highlighted = key
        self.highlight_timer = 6

        try:
            if key.kind is KeyKind.DIGIT:
                self.calc.submit_digit_or_point(key.label)
            elif key.kind is KeyKind.UNARY:
                self.calc.submit_unary_operator(key.label)
            elif key.kind is KeyKind.BINARY:
                self.calc.submit_binary_operator(key.label)
            elif key.kind is KeyKind.EQUALS:
                self.calc.evaluate()
            elif key.kind is KeyKind.CLEAR:
                self.calc.clear()
        except CalculatorError as e:
            print(f"⚠ Botón {key.label!r} rechazado: {e.message}")
            self.ui.show_feedback(e.message, self.config.error_color)
            return False

        self.refresh_display()
        return True

    def refresh_display(self):
        """
        Vuelve a leer el texto del display tras un evento.

        Con default_display=None la calculadora vacía no tiene texto que
        mostrar; el display queda en blanco.
        """
        try:
            self.display_text = self.calc.get_display()
        except InvalidStateError:
            self.display_text = ""

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: un clic izquierdo pulsa el botón."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        key = key_at(x, y, self.config.get_keypad_area(), self.config.key_gap)
        if key is not None:
            self.press(key)

    def on_key(self, keycode):
        """
        Procesa una tecla de cv2.waitKey.

        Returns:
            bool: False si la tecla pide salir (ESC o 'q')
        """
        if keycode == 27 or keycode == ord('q'):
            return False
        key = key_for_keycode(keycode)
        if key is not None:
            self.press(key)
        return True

    def render(self):
        """
        Dibuja un frame completo.

        Returns:
            np.array: Imagen BGR lista para cv2.imshow
        """
        frame = self.ui.new_frame()
        self.ui.draw_display(frame, self.display_text,
                             self.calc.get_expression(), self.calc.has_result)
        highlighted = self.highlighted if self.highlight_timer > 0 else None
        self.ui.draw_keypad(frame, highlighted)
        self.ui.draw_feedback(frame)

        if self.highlight_timer > 0:
            self.highlight_timer -= 1
        return frame

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar display y teclado
            2. Mostrar frame
            3. Procesar teclas (los clics llegan por on_mouse)
            4. Repetir hasta ESC, 'q' o cerrar la ventana

        Controles de teclado:
            - 0-9 y '.': dígitos
            - + - * /: operadores
            - %: porcentaje, n: cambio de signo
            - Enter o '=': calcular
            - c o Backspace: borrar todo (AC)
            - ESC o 'q': salir
        """
        title = self.config.window_title
        print("\n" + "=" * 50)
        print(title.upper())
        print("=" * 50)
        print("\nClic en los botones o usa el teclado:")
        print("  0-9 . + - * / %  |  n: +/-  |  Enter: =  |  c: AC")
        print("\nPresiona ESC o 'q' para salir\n")

        cv2.namedWindow(title)
        cv2.setMouseCallback(title, self.on_mouse)
        print(f"OK Ventana: {self.config.width}x{self.config.height}")

        self.running = True
        while self.running:
            cv2.imshow(title, self.render())

            key = cv2.waitKey(self.config.frame_delay_ms) & 0xFF
            if key != 0xFF and not self.on_key(key):
                break

            # Ventana cerrada con el botón del sistema
            if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                break

        self.running = False
        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
