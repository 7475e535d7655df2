"""
Configuración de ventana, colores y teclado de la calculadora.

Este módulo contiene la configuración centralizada de la interfaz: todo lo
que la capa gráfica necesita saber para dibujar y traducir teclas a símbolos.
"""

# ============================================================================
# CLASE: DisplayConfig
# Propósito: Configuración de la interfaz gráfica
# Responsabilidades:
#   - Almacenar dimensiones de ventana, panel y botones
#   - Definir colores (BGR) de cada tipo de botón y del display
#   - Traducir códigos de tecla a símbolos de la calculadora
# ============================================================================
class DisplayConfig:
    """
    Configuración de la interfaz para la calculadora.

    Opciones disponibles:
        - Geometría de ventana y de la cuadrícula de botones
        - Paleta de colores en formato BGR (OpenCV)
        - Tamaños de fuente según longitud del texto
        - Atajos de teclado
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_name = "Calculadora Basica"
        self.width = 420                    # Ancho de ventana en píxeles
        self.height = 640                   # Alto de ventana en píxeles
        self.frame_delay = 30               # ms de espera por frame (cv2.waitKey)

        # ====================================================================
        # PANEL DE DISPLAY Y CUADRÍCULA DE BOTONES
        # ====================================================================
        self.display_height = 160           # Alto del panel superior
        self.margin = 12                    # Margen exterior
        self.spacing = 8                    # Separación entre botones
        self.pressed_duration = 6           # Frames de resaltado del botón pulsado

        # ====================================================================
        # COLORES (BGR)
        # ====================================================================
        self.background_color = (30, 30, 30)
        self.display_color = (45, 45, 45)
        self.display_border_color = (100, 200, 255)
        self.text_color = (255, 255, 255)
        self.history_color = (170, 170, 170)
        self.error_color = (100, 100, 255)          # Rojo
        self.digit_color = (70, 70, 70)
        self.operator_color = (60, 110, 170)
        self.control_color = (55, 55, 90)
        self.equals_color = (60, 150, 60)
        self.pressed_color = (200, 200, 200)

        # ====================================================================
        # FUENTES
        # ====================================================================
        self.long_text_length = 10          # A partir de aquí se reduce la fuente
        self.display_font_scale = 2.0
        self.display_font_scale_small = 1.2
        self.history_font_scale = 0.7
        self.button_font_scale = 0.9

        # ====================================================================
        # TECLADO (código de tecla → símbolo)
        # ====================================================================
        self.exit_keys = (27, ord('q'))     # ESC o 'q'
        self.key_bindings = {ord(d): d for d in "0123456789"}
        self.key_bindings.update({
            ord('.'): ".",
            ord(','): ".",
            ord('+'): "+",
            ord('-'): "−",
            ord('*'): "x",
            ord('x'): "x",
            ord('/'): "÷",
            ord('='): "=",
            13: "=",                        # Enter
            10: "=",                        # Enter (Linux)
            ord('c'): "C",
            ord('e'): "CE",
            8: "←",                         # Backspace
            127: "←",                       # Delete / Backspace (macOS)
            ord('n'): "±",
        })

    def token_for_key(self, key):
        """
        Traduce un código de tecla a símbolo de la calculadora.

        Args:
            key (int): Código devuelto por cv2.waitKey (ya enmascarado con 0xFF)

        Returns:
            str | None: Símbolo asociado, o None si la tecla no tiene función
        """
        return self.key_bindings.get(key)

    def is_exit_key(self, key):
        """Retorna True si la tecla cierra la aplicación."""
        return key in self.exit_keys

    def get_font_scale(self, text):
        """Retorna el tamaño de fuente del display según la longitud del texto."""
        if len(text) < self.long_text_length:
            return self.display_font_scale
        return self.display_font_scale_small
