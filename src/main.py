"""
Punto de entrada de la calculadora básica.

Ejecución:
    python3 src/main.py
    calculadora-basica          (tras pip install)
"""

import traceback

from app.calculator_app import CalculatorApp


def main():
    """
    Crea la aplicación y ejecuta su bucle principal.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Muestra el error y el traceback completo
    """
    try:
        app = CalculatorApp()
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()


if __name__ == "__main__":
    main()
