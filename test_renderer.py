"""
Renderer Tests
==============

CompositeDescriptor construction and the renderer memo.

Usage:
    pytest test_renderer.py
"""

import json
import logging

import numpy as np
import pytest

from circleview import (
    BorderSpec,
    CircularImageRenderer,
    FitMode,
    MissingSource,
    Rgba,
    SourceImage,
    Viewport,
    build_descriptor,
    render_composite,
)
from circleview.logging import LogEvent, create_logger


def make_image(width: int, height: int, rgb=(255, 0, 0)) -> SourceImage:
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    pixels[:] = rgb
    return SourceImage.from_array(pixels)


def test_source_image_from_rgb_array():
    image = make_image(200, 100)

    assert image.size == (200, 100)
    assert image.pixels.shape == (100, 200, 4)
    assert (image.pixels[..., 3] == 255).all()
    assert not image.pixels.flags.writeable


def test_source_image_keeps_caller_array_writable():
    array = np.zeros((4, 4, 4), dtype=np.uint8)
    image = SourceImage(pixels=array)

    assert array.flags.writeable
    assert not image.pixels.flags.writeable

    array[:] = 255
    assert not image.pixels.any()


def test_source_image_rejects_bad_buffers():
    with pytest.raises(ValueError):
        SourceImage(pixels=np.zeros((10, 10, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        SourceImage(pixels=np.zeros((10, 10, 4), dtype=np.float32))
    with pytest.raises(ValueError):
        SourceImage(pixels=np.zeros((0, 10, 4), dtype=np.uint8))


def test_composite_with_border():
    border = BorderSpec(color=Rgba(255, 255, 255), width=4)

    descriptor = render_composite(make_image(200, 100), Viewport(100, 100), border)

    assert descriptor.transform.scale == 1.0
    assert descriptor.transform.offset_x == -50.0
    assert descriptor.clip.center == (50.0, 50.0)
    assert descriptor.clip.radius == 46.0
    assert descriptor.has_border
    assert descriptor.stroke.radius == 48.0
    assert descriptor.stroke.stroke_width == 4.0
    assert descriptor.stroke.color == Rgba(255, 255, 255)


def test_composite_without_border():
    descriptor = render_composite(make_image(100, 200), Viewport(100, 100))

    assert descriptor.stroke is None
    assert descriptor.clip.radius == 50.0
    assert descriptor.transform.offset_y == -50.0


def test_transparent_border_is_suppressed_but_still_insets():
    border = BorderSpec(color=Rgba(255, 255, 255, 0), width=4)

    descriptor = render_composite(make_image(100, 100), Viewport(100, 100), border)

    assert descriptor.stroke is None
    assert descriptor.clip.radius == 46.0


def test_missing_source_raises():
    with pytest.raises(MissingSource):
        render_composite(None, Viewport(100, 100))
    with pytest.raises(MissingSource):
        CircularImageRenderer().render_composite(None, Viewport(100, 100))


def test_contain_mode_descriptor():
    descriptor = render_composite(make_image(200, 100), Viewport(100, 100), fit_mode="contain")

    assert descriptor.fit_mode is FitMode.CONTAIN
    assert descriptor.transform.scale == 0.5
    assert descriptor.transform.offset_y == 25.0


def test_descriptor_is_json_serializable():
    border = BorderSpec(color=Rgba(0, 0, 255, 128), width=2)
    descriptor = render_composite(make_image(64, 48), Viewport(32, 32), border)

    data = json.loads(json.dumps(descriptor.to_dict()))

    assert data['viewport'] == [32, 32]
    assert data['fit_mode'] == "cover"
    assert data['stroke']['color'] == "#0000ff80"
    assert data['clip']['radius'] == 14.0


def test_render_composite_is_pure():
    image = make_image(333, 127)
    border = BorderSpec(color=Rgba(1, 2, 3), width=1.5)

    first = render_composite(image, Viewport(91, 64), border)
    second = render_composite(image, Viewport(91, 64), border)

    assert first == second
    assert first is not second


def test_renderer_memoizes_last_descriptor():
    renderer = CircularImageRenderer()
    image = make_image(200, 100)
    viewport = Viewport(100, 100)

    first = renderer.render_composite(image, viewport)
    second = renderer.render_composite(image, viewport)

    assert first is second
    assert renderer.cache_info().hits == 1
    assert renderer.cache_info().misses == 1


def test_renderer_recomputes_when_inputs_change():
    renderer = CircularImageRenderer()
    image = make_image(200, 100)

    a = renderer.render_composite(image, Viewport(100, 100))
    b = renderer.render_composite(image, Viewport(120, 100))
    c = renderer.render_composite(image, Viewport(120, 100), BorderSpec(Rgba(0, 0, 0), 3))
    d = renderer.render_composite(make_image(50, 50), Viewport(120, 100), BorderSpec(Rgba(0, 0, 0), 3))

    assert len({id(x) for x in (a, b, c, d)}) == 4
    assert renderer.cache_info().misses == 4
    assert renderer.cache_info().hits == 0


def test_renderer_invalidate_forces_rebuild():
    renderer = CircularImageRenderer()
    image = make_image(10, 10)

    first = renderer.render_composite(image, Viewport(10, 10))
    renderer.invalidate()
    second = renderer.render_composite(image, Viewport(10, 10))

    assert first is not second
    assert first == second
    assert renderer.cache_info().misses == 2


def test_renderer_instance_geometry_helpers():
    renderer = CircularImageRenderer(fit_mode=FitMode.CONTAIN)

    assert renderer.compute_fit_transform(200, 100, 100, 100).offset_y == 25.0
    assert renderer.compute_circle_geometry(100, 100, 10).radius == 40.0


def test_renderer_logs_build_and_hit(caplog):
    logger = create_logger("renderer-test", level=logging.DEBUG)
    renderer = CircularImageRenderer(logger=logger)
    image = make_image(20, 20)

    with caplog.at_level(logging.DEBUG, logger="circleview.renderer-test"):
        renderer.render_composite(image, Viewport(10, 10))
        renderer.render_composite(image, Viewport(10, 10))

    events = [json.loads(r.getMessage())['event'] for r in caplog.records]
    assert events == [LogEvent.COMPOSITE_BUILT.value, LogEvent.CACHE_HIT.value]


def test_build_descriptor_matches_render_composite():
    border = BorderSpec(color=Rgba(0, 0, 0), width=4)

    from_size = build_descriptor((200, 100), Viewport(100, 100), border, FitMode.COVER)
    from_image = render_composite(make_image(200, 100), Viewport(100, 100), border)

    assert from_size == from_image
    assert from_size.transform.offset_x == -50.0


def test_build_descriptor_accepts_mode_name():
    descriptor = build_descriptor((100, 200), Viewport(100, 100), BorderSpec(), "contain")

    assert descriptor.fit_mode is FitMode.CONTAIN
    assert descriptor.stroke is None
