"""
Geometry Layer
==============

Bounded Context: Pure geometry for circular image rendering.

Responsibilities:
- Value types (Viewport, BorderSpec, FitTransform, CircleGeometry, StrokeCommand)
- Cover / contain fit transform
- Inscribed circle and ring stroke geometry
- NO state, NO drawing

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from circleview.geometry.shapes import (
    BorderSpec,
    CircleGeometry,
    FitMode,
    FitTransform,
    StrokeCommand,
    Viewport,
)
from circleview.geometry.fitting import (
    compute_circle_geometry,
    compute_fit_transform,
    compute_stroke,
)

__all__ = [
    "BorderSpec",
    "CircleGeometry",
    "FitMode",
    "FitTransform",
    "StrokeCommand",
    "Viewport",
    "compute_circle_geometry",
    "compute_fit_transform",
    "compute_stroke",
]
