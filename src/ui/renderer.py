"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja todos los elementos visuales.
"""

import cv2
import numpy as np

from .layout import ascii_text


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display principal: historial de la operación y número actual
        2. Botonera: cuadrícula de botones con el último pulsado resaltado
        3. Feedback: mensajes temporales de confirmación/error
    """

    def __init__(self, config, layout):
        """
        Inicializa el renderizador.

        Args:
            config (DisplayConfig): Dimensiones, colores y fuentes
            layout (ButtonLayout): Posición de cada botón
        """
        self.config = config
        self.layout = layout
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)   # Color del feedback
        self.pressed_token = None            # Último botón pulsado
        self.pressed_timer = 0               # Frames restantes de resaltado

    def show_feedback(self, msg, color=(0, 255, 0), duration=40):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration

    def mark_pressed(self, token):
        """Resalta el botón de un símbolo durante unos frames."""
        self.pressed_token = token
        self.pressed_timer = self.config.pressed_duration

    def render(self, state):
        """
        Dibuja un frame completo de la calculadora.

        Args:
            state (CalculatorState): Estado a mostrar

        Returns:
            np.ndarray: Imagen BGR de config.height x config.width
        """
        img = np.zeros((self.config.height, self.config.width, 3), dtype=np.uint8)
        img[:] = self.config.background_color

        self.draw_display(img, state)
        self.draw_buttons(img)
        self.draw_feedback(img)

        if self.pressed_timer > 0:
            self.pressed_timer -= 1
        return img

    def draw_display(self, img, state):
        """
        Dibuja el display principal.

        Componentes:
            1. Historial de la operación (pequeño, gris, arriba)
            2. Número actual (grande, alineado a la derecha)

        Colores del número:
            - Blanco: Número normal
            - Rojo: Error (división por cero)
        """
        cfg = self.config
        x, y = cfg.margin, cfg.margin
        w, h = cfg.width - cfg.margin * 2, cfg.display_height

        cv2.rectangle(img, (x, y), (x + w, y + h), cfg.display_color, -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), cfg.display_border_color, 2)

        history = ascii_text(state.get_expression())
        if history:
            self._put_right(img, history, x + w - 15, y + 45,
                            cv2.FONT_HERSHEY_SIMPLEX, cfg.history_font_scale,
                            cfg.history_color, 1)

        display = ascii_text(state.get_display())
        color = cfg.error_color if state.is_error() else cfg.text_color
        font_scale = cfg.get_font_scale(display)
        self._put_right(img, display, x + w - 15, y + h - 30,
                        cv2.FONT_HERSHEY_DUPLEX, font_scale, color, 2)

    def draw_buttons(self, img):
        """Dibuja todos los botones de la botonera."""
        cfg = self.config
        colors = {
            "digit": cfg.digit_color,
            "operator": cfg.operator_color,
            "control": cfg.control_color,
            "equals": cfg.equals_color,
        }
        for button in self.layout.buttons:
            pressed = self.pressed_timer > 0 and button.token == self.pressed_token
            color = cfg.pressed_color if pressed else colors[button.kind()]
            cv2.rectangle(img, (button.x, button.y),
                          (button.x + button.w, button.y + button.h), color, -1)

            (text_w, text_h), _ = cv2.getTextSize(
                button.label, cv2.FONT_HERSHEY_SIMPLEX, cfg.button_font_scale, 2)
            cx, cy = button.center()
            text_color = (30, 30, 30) if pressed else cfg.text_color
            cv2.putText(img, button.label, (cx - text_w // 2, cy + text_h // 2),
                        cv2.FONT_HERSHEY_SIMPLEX, cfg.button_font_scale, text_color, 2)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal sobre la parte baja del display.

        El color se atenúa en los últimos frames (fade-out).
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            alpha = min(self.feedback_timer / 20.0, 1.0)
            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, self.feedback_msg,
                        (self.config.margin + 15, self.config.margin + 75),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.55, color, 1)

    @staticmethod
    def _put_right(img, text, right_x, baseline_y, font, scale, color, thickness):
        text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
        cv2.putText(img, text, (right_x - text_w, baseline_y), font, scale, color, thickness)
