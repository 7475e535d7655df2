"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

from collections import deque

import cv2

from config.display import DisplayConfig
from core.calculator import CalculatorState
from ui.layout import ButtonLayout
from ui.renderer import UIRenderer


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - CalculatorState: Lógica aritmética y estado
        - ButtonLayout: Posición de cada botón en la ventana
        - UIRenderer: Renderizado de interfaz gráfica
        - CalculatorApp: Coordinador y loop principal

    Serialización de la entrada:
        Los clics de ratón se encolan desde el callback de OpenCV y se
        procesan en el bucle principal junto con las teclas, de modo que
        cada símbolo se aplica completo antes del siguiente.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación.

        Args:
            config (DisplayConfig): Configuración de interfaz (opcional)
        """
        self.config = config if config else DisplayConfig()

        # Inicializar componentes principales
        self.state = CalculatorState()                              # Lógica de calculadora
        self.layout = ButtonLayout(self.config)                     # Botonera
        self.ui = UIRenderer(self.config, self.layout)              # Renderizador UI

        self.pending = deque()          # Símbolos de clics aún no procesados

        print(f"OK Ventana: {self.config.width}x{self.config.height}")

    def press(self, token):
        """
        Aplica un símbolo de entrada y actualiza el feedback visual.

        Args:
            token (str): Símbolo de la calculadora ("7", "+", "=", "CE", ...)

        Returns:
            tuple: (display, historial) leídos del estado tras la entrada

        Feedback:
            - Rojo: La entrada provocó una división por cero
            - Naranja: Entrada descartada por el bloqueo de error
            - Verde: Bloqueo liberado con C o CE
        """
        was_locked = self.state.error
        self.state.handle_input(token)
        self.ui.mark_pressed(token)

        if self.state.error and not was_locked:
            self.ui.show_feedback("ERROR: DIVISION POR CERO", (100, 100, 255), 60)
            print("⚠ Division por cero: pulse C o CE para continuar")
        elif self.state.error:
            self.ui.show_feedback("BLOQUEADO - pulse C o CE", (0, 165, 255))
        elif was_locked:
            self.ui.show_feedback("OK DESBLOQUEADO", (100, 255, 100))

        return self.state.get_display(), self.state.get_expression()

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: encola el botón pulsado."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        token = self.layout.button_at(x, y)
        if token is not None:
            self.pending.append(token)

    def process_pending(self):
        """Aplica en orden todos los clics encolados."""
        while self.pending:
            self.press(self.pending.popleft())

    def handle_key(self, key):
        """
        Procesa una tecla leída con cv2.waitKey.

        Args:
            key (int): Código de tecla enmascarado con 0xFF (255 = sin tecla)

        Returns:
            bool: False si la tecla pide cerrar la aplicación
        """
        if self.config.is_exit_key(key):
            return False
        token = self.config.token_for_key(key)
        if token is not None:
            self.press(token)
        return True

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Aplicar clics encolados
            2. Renderizar display y botonera
            3. Mostrar frame y procesar teclado
            4. Repetir hasta ESC, 'q' o cierre de ventana
        """
        print("\n" + "="*50)
        print("CALCULADORA BASICA")
        print("="*50)
        print("\nNumeros: 0-9   Decimal: .   Signo: n")
        print("Operaciones: +  -  *  /     Calcular: Enter o =")
        print("Borrar: c (todo)  e (entrada)  Backspace (ultimo digito)")
        print("\nPresiona ESC o 'q' para salir")
        print("="*50 + "\n")

        name = self.config.window_name
        cv2.namedWindow(name, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(name, self.on_mouse)

        while True:
            self.process_pending()

            frame = self.ui.render(self.state)
            cv2.imshow(name, frame)

            key = cv2.waitKey(self.config.frame_delay) & 0xFF
            if not self.handle_key(key):
                break

            # Ventana cerrada con el botón del sistema
            if cv2.getWindowProperty(name, cv2.WND_PROP_VISIBLE) < 1:
                break

        cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
