"""UIRenderer: dibujo del display y la botonera sobre imágenes numpy."""

import pytest

cv2 = pytest.importorskip("cv2")
np = pytest.importorskip("numpy")

from config.display import DisplayConfig  # noqa: E402
from core.calculator import CalculatorState  # noqa: E402
from ui.layout import ButtonLayout  # noqa: E402
from ui.renderer import UIRenderer  # noqa: E402


@pytest.fixture
def renderer():
    config = DisplayConfig()
    return UIRenderer(config, ButtonLayout(config))


def test_render_returns_bgr_frame(renderer):
    img = renderer.render(CalculatorState())
    assert img.shape == (renderer.config.height, renderer.config.width, 3)
    assert img.dtype == np.uint8


def test_render_draws_something(renderer):
    img = renderer.render(CalculatorState())
    background = np.array(renderer.config.background_color, dtype=np.uint8)
    assert (img != background).any(axis=2).sum() > 0


def test_error_display_uses_error_color(renderer):
    state = CalculatorState()
    for token in ("9", "÷", "0", "="):
        state.handle_input(token)
    img = renderer.render(state)
    error = np.array(renderer.config.error_color, dtype=np.uint8)
    assert (img == error).all(axis=2).any()


def test_render_long_and_glyph_text(renderer):
    state = CalculatorState()
    for token in "12345678901234567890":
        state.handle_input(token)
    state.handle_input("−")
    img = renderer.render(state)
    assert img.shape[2] == 3


def test_pressed_highlight_expires(renderer):
    renderer.mark_pressed("7")
    frames = renderer.config.pressed_duration
    for _ in range(frames):
        assert renderer.pressed_timer > 0
        renderer.render(CalculatorState())
    assert renderer.pressed_timer == 0


def test_feedback_expires(renderer):
    renderer.show_feedback("OK", duration=3)
    for _ in range(3):
        renderer.render(CalculatorState())
    assert renderer.feedback_timer == 0
