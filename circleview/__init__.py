"""
circleview
==========

Bounded Context: Circular image rendering with an optional ring border.

Design Philosophy:
- Separation of Concerns: Geometry, Rendering, View separated
- Geometry is pure and immutable, rendering is stateless apart from a
  single-slot memo, the view only holds attributes
- Cover (center-crop) is the canonical fit, contain is opt-in

Architecture:

    circleview/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Viewport, BorderSpec, FitTransform, CircleGeometry
    │   └── fitting.py     # compute_fit_transform, compute_circle_geometry
    │
    ├── rendering/         # Composite building & execution
    │   ├── renderer.py    # CircularImageRenderer, CompositeDescriptor
    │   └── surface.py     # Surface protocol, RasterSurface (OpenCV)
    │
    ├── view.py            # CircleImageView (host adapter)
    ├── config.py          # ViewConfig (YAML)
    ├── image.py           # SourceImage (Pillow I/O)
    └── logging/           # Structured JSON logging

Usage:

    from circleview import CircleImageView, ViewConfig, Rgba, load_source_image

    view = CircleImageView(ViewConfig(border_width=4, border_color=Rgba(255, 255, 255)))
    view.set_image(load_source_image("avatar.jpg"))
    view.set_size(200, 200)
    pixels = view.render()   # HxWx4 RGBA array
"""

from circleview.color import Rgba, TRANSPARENT
from circleview.errors import CircleViewError, InvalidBorder, InvalidDimension, MissingSource

# Geometry Layer (immutable, stateless)
from circleview.geometry import (
    BorderSpec,
    CircleGeometry,
    FitMode,
    FitTransform,
    StrokeCommand,
    Viewport,
    compute_circle_geometry,
    compute_fit_transform,
)

# Rendering Layer
from circleview.rendering import (
    CircularImageRenderer,
    CompositeDescriptor,
    RasterSurface,
    Surface,
    build_descriptor,
    render_composite,
)

# Host adapter
from circleview.config import ViewConfig
from circleview.image import SourceImage, load_source_image, save_image
from circleview.view import CircleImageView

__all__ = [
    # Values
    "Rgba",
    "TRANSPARENT",
    # Errors
    "CircleViewError",
    "InvalidBorder",
    "InvalidDimension",
    "MissingSource",
    # Geometry
    "BorderSpec",
    "CircleGeometry",
    "FitMode",
    "FitTransform",
    "StrokeCommand",
    "Viewport",
    "compute_circle_geometry",
    "compute_fit_transform",
    # Rendering
    "CircularImageRenderer",
    "CompositeDescriptor",
    "RasterSurface",
    "Surface",
    "build_descriptor",
    "render_composite",
    # View
    "CircleImageView",
    "SourceImage",
    "ViewConfig",
    "load_source_image",
    "save_image",
]

__version__ = "1.0.0"
