"""DisplayConfig: atajos de teclado y tamaños de fuente."""

from config.display import DisplayConfig
from core.calculator import CalculatorState


def test_digit_keys_map_to_digits():
    config = DisplayConfig()
    for d in "0123456789":
        assert config.token_for_key(ord(d)) == d


def test_operator_keys_map_to_glyphs():
    config = DisplayConfig()
    assert config.token_for_key(ord('+')) == "+"
    assert config.token_for_key(ord('-')) == "−"
    assert config.token_for_key(ord('*')) == "x"
    assert config.token_for_key(ord('/')) == "÷"


def test_control_keys():
    config = DisplayConfig()
    assert config.token_for_key(13) == "="
    assert config.token_for_key(8) == "←"
    assert config.token_for_key(ord('c')) == "C"
    assert config.token_for_key(ord('e')) == "CE"
    assert config.token_for_key(ord('n')) == "±"


def test_unbound_key():
    config = DisplayConfig()
    assert config.token_for_key(255) is None
    assert config.token_for_key(ord('z')) is None


def test_exit_keys():
    config = DisplayConfig()
    assert config.is_exit_key(27)
    assert config.is_exit_key(ord('q'))
    assert not config.is_exit_key(ord('c'))


def test_bound_tokens_drive_calculator():
    config = DisplayConfig()
    state = CalculatorState()
    for key in b"12+3\r":
        state.handle_input(config.token_for_key(key))
    assert state.current == "15"


def test_font_scale_shrinks_for_long_text():
    config = DisplayConfig()
    assert config.get_font_scale("123") == config.display_font_scale
    assert config.get_font_scale("1" * 20) == config.display_font_scale_small
