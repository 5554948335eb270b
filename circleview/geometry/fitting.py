"""
Fit & Circle Computations
=========================

Stateless functions mapping (source size, viewport size, border) to
geometry values. O(1) arithmetic, no rounding beyond floating point.
"""

from typing import Optional

from circleview.errors import InvalidBorder
from circleview.geometry.shapes import (
    BorderSpec,
    CircleGeometry,
    FitMode,
    FitTransform,
    StrokeCommand,
    require_positive,
)


def compute_fit_transform(
    source_width: int,
    source_height: int,
    viewport_width: int,
    viewport_height: int,
    fit_mode: FitMode = FitMode.COVER,
) -> FitTransform:
    """
    Compute the scale/translate that maps the source onto the viewport.

    COVER scales so the image covers the viewport on both axes and centers
    the overflow on the other axis (offsets are <= 0). CONTAIN scales so the
    whole image fits and centers the leftover space (offsets are >= 0).

    Args:
        source_width: Source image width (pixels)
        source_height: Source image height (pixels)
        viewport_width: Viewport width (pixels)
        viewport_height: Viewport height (pixels)
        fit_mode: FitMode.COVER (default) or FitMode.CONTAIN

    Returns:
        FitTransform

    Raises:
        InvalidDimension: If any dimension is not positive

    Example:
        >>> compute_fit_transform(200, 100, 100, 100)
        FitTransform(scale=1.0, offset_x=-50.0, offset_y=0.0)
    """
    require_positive("source width", source_width)
    require_positive("source height", source_height)
    require_positive("viewport width", viewport_width)
    require_positive("viewport height", viewport_height)
    fit_mode = FitMode.parse(fit_mode)

    # Cross-multiplied aspect comparison, avoids dividing before branching
    width_ratio_product = source_width * viewport_height
    height_ratio_product = viewport_width * source_height
    relatively_wider = width_ratio_product > height_ratio_product

    # Cover constrains on the short axis, contain on the long one
    match_height = relatively_wider if fit_mode is FitMode.COVER else not relatively_wider

    if match_height:
        scale = viewport_height / source_height
        offset_x = (viewport_width - source_width * scale) / 2
        offset_y = 0.0
    else:
        scale = viewport_width / source_width
        offset_x = 0.0
        offset_y = (viewport_height - source_height * scale) / 2

    return FitTransform(scale=scale, offset_x=offset_x, offset_y=offset_y)


def compute_circle_geometry(
    viewport_width: int,
    viewport_height: int,
    border_width: float = 0.0,
) -> CircleGeometry:
    """
    Circle inscribed in the viewport, shrunk by the border width.

    radius = max(0, min(w, h) / 2 - border_width)

    Raises:
        InvalidDimension: If the viewport is not positive
        InvalidBorder: If border_width is negative
    """
    require_positive("viewport width", viewport_width)
    require_positive("viewport height", viewport_height)
    if border_width < 0:
        raise InvalidBorder(f"border width must be >= 0, got {border_width}")

    return CircleGeometry(
        center_x=viewport_width / 2,
        center_y=viewport_height / 2,
        bounds_radius=min(viewport_width, viewport_height) / 2,
        border_width=float(border_width),
    )


def compute_stroke(circle: CircleGeometry, border: BorderSpec) -> Optional[StrokeCommand]:
    """
    Ring stroke for an active border, or None.

    The ring sits between the clip edge and the viewport bounds, so the
    stroke radius is bounds_radius - border_width / 2.
    """
    if not border.is_active:
        return None

    return StrokeCommand(
        center_x=circle.center_x,
        center_y=circle.center_y,
        radius=max(0.0, circle.bounds_radius - border.width / 2),
        stroke_width=float(border.width),
        color=border.color,
    )
