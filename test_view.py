"""
CircleImageView Tests
=====================

Host adapter behavior: attribute setters, redraw flag, missing source
no-op and delegation to a Surface.

Usage:
    pytest test_view.py
"""

import numpy as np
import pytest

from circleview import (
    CircleImageView,
    FitMode,
    InvalidBorder,
    InvalidDimension,
    Rgba,
    SourceImage,
    TRANSPARENT,
    ViewConfig,
)


class RecordingSurface:
    """Surface double that records drawing commands."""

    def __init__(self):
        self.fills = []
        self.strokes = []

    def fill_circle(self, source, transform, clip, fit_mode=FitMode.COVER):
        self.fills.append((source, transform, clip, fit_mode))

    def stroke_circle(self, stroke):
        self.strokes.append(stroke)


def make_image(width=64, height=32) -> SourceImage:
    return SourceImage.from_array(np.full((height, width, 3), 200, dtype=np.uint8))


def test_defaults_match_styling_attributes():
    view = CircleImageView()

    assert view.border_color == TRANSPARENT
    assert view.border_width == 0.0
    assert view.fit_mode is FitMode.COVER
    assert view.image is None
    assert view.needs_redraw


def test_missing_source_draws_nothing():
    view = CircleImageView()
    view.set_size(100, 100)
    surface = RecordingSurface()

    assert view.draw(surface) is None
    assert surface.fills == []
    assert view.render() is None
    assert not view.needs_redraw


def test_missing_size_draws_nothing():
    view = CircleImageView()
    view.set_image(make_image())
    surface = RecordingSurface()

    assert view.draw(surface) is None
    assert surface.fills == []


def test_draw_delegates_fill_and_stroke():
    view = CircleImageView(ViewConfig(border_color=Rgba(0, 0, 0), border_width=3))
    image = make_image()
    view.set_image(image)
    view.set_size(50, 50)
    surface = RecordingSurface()

    descriptor = view.draw(surface)

    assert descriptor is not None
    assert len(surface.fills) == 1
    assert surface.fills[0][0] is image
    assert surface.fills[0][2].radius == 22.0
    assert len(surface.strokes) == 1
    assert surface.strokes[0].radius == 23.5
    assert not view.needs_redraw


def test_transparent_border_skips_stroke():
    view = CircleImageView(ViewConfig(border_width=3))
    view.set_image(make_image())
    view.set_size(50, 50)
    surface = RecordingSurface()

    view.draw(surface)

    assert len(surface.fills) == 1
    assert surface.strokes == []


def test_setters_mark_dirty():
    view = CircleImageView()
    view.set_image(make_image())
    view.set_size(20, 20)
    view.draw(RecordingSurface())
    assert not view.needs_redraw

    view.set_border_width(2)
    assert view.needs_redraw
    view.draw(RecordingSurface())

    view.set_border_color("#ff0000")
    assert view.needs_redraw
    assert view.border_color == Rgba(255, 0, 0)


def test_border_color_accepts_argb_int():
    view = CircleImageView()

    view.set_border_color(0x80FF5722)

    assert view.border_color == Rgba(255, 87, 34, 128)


def test_border_color_resource_lookup():
    view = CircleImageView(ViewConfig(palette={"accent": Rgba(255, 87, 34)}))

    view.set_border_color_resource("accent")

    assert view.border_color == Rgba(255, 87, 34)
    with pytest.raises(KeyError):
        view.set_border_color_resource("missing")


def test_negative_border_width_is_rejected():
    view = CircleImageView()

    with pytest.raises(InvalidBorder):
        view.set_border_width(-1)
    assert view.border_width == 0.0


def test_fit_mode_switch():
    view = CircleImageView()
    view.set_image(make_image(200, 100))
    view.set_size(100, 100)

    view.set_fit_mode("contain")
    descriptor = view.composite()

    assert view.fit_mode is FitMode.CONTAIN
    assert descriptor.transform.offset_y == 25.0


def test_redraw_reuses_memoized_descriptor():
    view = CircleImageView()
    view.set_image(make_image())
    view.set_size(40, 40)

    first = view.draw(RecordingSurface())
    second = view.draw(RecordingSurface())

    assert first is second
    assert view.renderer.cache_info().hits == 1


def test_render_returns_rgba_pixels():
    view = CircleImageView(ViewConfig(border_color=Rgba(255, 255, 255), border_width=4))
    view.set_image(make_image())
    view.set_size(60, 40)

    pixels = view.render()

    assert pixels.shape == (40, 60, 4)
    assert pixels[0, 0, 3] == 0
    assert tuple(pixels[20, 30]) == (200, 200, 200, 255)


def test_invalid_size_surfaces_at_draw_time():
    view = CircleImageView()
    view.set_image(make_image())
    view.set_size(0, 40)

    with pytest.raises(InvalidDimension):
        view.draw(RecordingSurface())
