"""
Color Value Tests
=================

Usage:
    pytest test_color.py
"""

import pytest
import supervision as sv

from circleview import Rgba, TRANSPARENT


def test_from_hex_variants():
    assert Rgba.from_hex("#ff0000") == Rgba(255, 0, 0, 255)
    assert Rgba.from_hex("#ff000080") == Rgba(255, 0, 0, 128)
    assert Rgba.from_hex("#fff") == Rgba(255, 255, 255, 255)
    assert Rgba.from_hex("00ff00") == Rgba(0, 255, 0, 255)


@pytest.mark.parametrize("value", ["#12345", "#gg0000", "#ff0000zz", ""])
def test_from_hex_rejects_garbage(value):
    with pytest.raises(ValueError):
        Rgba.from_hex(value)


def test_from_argb_int():
    assert Rgba.from_argb_int(0x80FF0000) == Rgba(255, 0, 0, 128)
    assert Rgba.from_argb_int(0x00000000) == TRANSPARENT
    # Signed 32-bit ints (as hosts often hand them over) are accepted
    assert Rgba.from_argb_int(-1) == Rgba(255, 255, 255, 255)


def test_channel_range_is_validated():
    with pytest.raises(ValueError):
        Rgba(256, 0, 0)
    with pytest.raises(ValueError):
        Rgba(0, 0, 0, -1)
    with pytest.raises(ValueError):
        Rgba(0.5, 0, 0)


def test_coerce():
    red = Rgba(255, 0, 0)

    assert Rgba.coerce(red) is red
    assert Rgba.coerce("#ff0000") == red
    assert Rgba.coerce(0xFFFF0000) == red
    with pytest.raises(ValueError):
        Rgba.coerce(None)


def test_transparency_and_conversions():
    color = Rgba(10, 20, 30, 0)

    assert color.is_transparent
    assert TRANSPARENT.is_transparent
    assert not Rgba(10, 20, 30).is_transparent
    assert color.to_sv_color() == sv.Color(r=10, g=20, b=30)
    assert color.as_rgb() == (10, 20, 30)
    assert Rgba(255, 87, 34, 128).to_hex() == "#ff572280"
