"""
Geometría de la cuadrícula de botones.

Este módulo no depende de OpenCV: solo calcula rectángulos y resuelve qué
botón hay bajo un punto de la ventana.
"""

# Filas de la botonera, de arriba a abajo
BUTTON_ROWS = [
    ["CE", "C", "←", "÷"],
    ["7", "8", "9", "x"],
    ["4", "5", "6", "−"],
    ["1", "2", "3", "+"],
    ["±", "0", ".", "="],
]

# Las fuentes Hershey de OpenCV solo dibujan ASCII
ASCII_LABELS = {
    "÷": "/",
    "−": "-",
    "←": "<-",
    "±": "+/-",
}

OPERATOR_TOKENS = ("+", "−", "x", "÷")
CONTROL_TOKENS = ("C", "CE", "←", "±")


def ascii_text(text):
    """Sustituye los símbolos no ASCII de un texto por su etiqueta ASCII."""
    for glyph, label in ASCII_LABELS.items():
        text = text.replace(glyph, label)
    return text


class Button:
    """Botón rectangular asociado a un símbolo de entrada."""

    def __init__(self, token, x, y, w, h):
        self.token = token
        self.label = ASCII_LABELS.get(token, token)
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def contains(self, px, py):
        """True si el punto (px, py) cae dentro del botón."""
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    def center(self):
        return self.x + self.w // 2, self.y + self.h // 2

    def kind(self):
        """Tipo de botón para elegir color: digit, operator, control o equals."""
        if self.token == "=":
            return "equals"
        if self.token in OPERATOR_TOKENS:
            return "operator"
        if self.token in CONTROL_TOKENS:
            return "control"
        return "digit"

    def __repr__(self):
        return f"Button({self.token!r}, {self.x}, {self.y}, {self.w}, {self.h})"


# ============================================================================
# CLASE: ButtonLayout
# Propósito: Distribuir los botones bajo el panel de display
# ============================================================================
class ButtonLayout:
    """
    Cuadrícula de 5x4 botones que ocupa la ventana bajo el display.

        CE  C   <-  /
        7   8   9   x
        4   5   6   -
        1   2   3   +
        +/- 0   .   =
    """

    def __init__(self, config):
        """
        Calcula los rectángulos de todos los botones.

        Args:
            config (DisplayConfig): Dimensiones de ventana, margen y separación
        """
        self.config = config
        self.buttons = []

        rows = len(BUTTON_ROWS)
        cols = len(BUTTON_ROWS[0])
        top = config.display_height + config.margin * 2
        usable_w = config.width - config.margin * 2 - config.spacing * (cols - 1)
        usable_h = config.height - top - config.margin - config.spacing * (rows - 1)
        button_w = usable_w // cols
        button_h = usable_h // rows

        for r, row in enumerate(BUTTON_ROWS):
            for c, token in enumerate(row):
                x = config.margin + c * (button_w + config.spacing)
                y = top + r * (button_h + config.spacing)
                self.buttons.append(Button(token, x, y, button_w, button_h))

    def button_at(self, px, py):
        """
        Busca el botón bajo un punto de la ventana.

        Returns:
            str | None: Símbolo del botón, o None si el punto cae fuera
                        (display, márgenes o separaciones)
        """
        for button in self.buttons:
            if button.contains(px, py):
                return button.token
        return None

    def find(self, token):
        """Retorna el botón de un símbolo, o None si no hay botón para él."""
        for button in self.buttons:
            if button.token == token:
                return button
        return None
