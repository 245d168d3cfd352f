import logging
import pytest
from swfdisplay import *

@pytest.mark.parametrize('value, mode', [
    (0, BlendMode.NORMAL),
    (1, BlendMode.NORMAL),
    (2, BlendMode.LAYER),
    (3, BlendMode.MULTIPLY),
    (4, BlendMode.SCREEN),
    (5, BlendMode.LIGHTEN),
    (6, BlendMode.DARKEN),
    (7, BlendMode.DIFFERENCE),
    (8, BlendMode.ADD),
    (9, BlendMode.SUBTRACT),
    (10, BlendMode.INVERT),
    (11, BlendMode.ALPHA),
    (12, BlendMode.ERASE),
    (13, BlendMode.OVERLAY),
    (14, BlendMode.HARDLIGHT),
])
def test_blend_modes(value, mode):
    assert decode_blend_mode(bytes([value, 0xAA])) == (b'\xaa', mode)

def test_unknown_blend_mode_is_rejected():
    with pytest.raises(UnknownDiscriminantError) as excinfo:
        decode_blend_mode(b'\x0f')
    assert excinfo.value.field == 'blend mode'
    assert excinfo.value.value == 15

def test_unknown_blend_mode_falls_back_to_normal(caplog):
    with caplog.at_level(logging.WARNING, logger='swfdisplay.parser'):
        assert decode_blend_mode(b'\xff', strict=False) == (b'', BlendMode.NORMAL)
    assert 'blend mode 255' in caplog.text

def test_empty_input_is_incomplete():
    with pytest.raises(IncompleteInputError) as excinfo:
        decode_blend_mode(b'')
    assert excinfo.value.needed == 1
    assert not isinstance(excinfo.value, DecodeError)
