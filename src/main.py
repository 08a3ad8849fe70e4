"""
Punto de entrada de la calculadora.

Ejecución:
    python3 src/main.py
    calculadora-teclado          (tras pip install)
"""

from app.calculator_app import CalculatorApp
from config.settings import CalculatorConfig


def main():
    """
    Crea la aplicación y ejecuta el bucle principal.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Captura errores inesperados y muestra traceback
    """
    try:
        app = CalculatorApp(CalculatorConfig())
        app.run()
    except KeyboardInterrupt:
        # Usuario presionó Ctrl+C
        print("\nInterrumpido por el usuario")
    except Exception as e:
        # Error inesperado - mostrar información completa
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    raise SystemExit(main())
