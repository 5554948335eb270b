"""
Rendering Layer
===============

Bounded Context: Circular composite construction and execution.

Responsibilities:
- Build CompositeDescriptors (clip circle, transform, ring stroke)
- Memoize the last descriptor between draws
- Execute descriptors on an RGBA raster surface

Non-responsibilities:
- Geometry math (handled by geometry)
- Attribute/state management (handled by view)
"""

from circleview.rendering.renderer import (
    CacheInfo,
    CircularImageRenderer,
    CompositeDescriptor,
    build_descriptor,
    render_composite,
)
from circleview.rendering.surface import RasterSurface, Surface, execute_composite

__all__ = [
    "CacheInfo",
    "CircularImageRenderer",
    "CompositeDescriptor",
    "RasterSurface",
    "Surface",
    "build_descriptor",
    "execute_composite",
    "render_composite",
]
