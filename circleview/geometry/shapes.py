"""
Geometric Values Module
=======================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable values (frozen dataclass pattern)
- Fail-fast validation in __post_init__
- Derived quantities (radius) are properties, never stored
- Hashable, so the renderer can memoize on them
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from circleview.color import Rgba, TRANSPARENT
from circleview.errors import InvalidBorder, InvalidDimension


class FitMode(str, Enum):
    """
    How the source image is mapped onto the viewport.

    COVER fills the viewport and crops the excess (center-crop).
    CONTAIN fits the whole image inside the viewport (letterbox).
    """

    COVER = "cover"
    CONTAIN = "contain"

    @classmethod
    def parse(cls, value: "FitMode | str") -> "FitMode":
        if isinstance(value, FitMode):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = [m.value for m in cls]
            raise ValueError(f"Invalid fit_mode: {value}. Must be one of {valid}") from None


def require_positive(name: str, value: float) -> None:
    """Raise InvalidDimension unless value > 0."""
    if value <= 0:
        raise InvalidDimension(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class Viewport:
    """
    Target region (pixels) into which the circle is inscribed.

    Attributes:
        width: Viewport width in pixels
        height: Viewport height in pixels
    """

    width: int
    height: int

    def __post_init__(self):
        """Validate dimensions."""
        require_positive("viewport width", self.width)
        require_positive("viewport height", self.height)

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return (self.width, self.height)


@dataclass(frozen=True)
class BorderSpec:
    """
    Ring border style.

    Attributes:
        color: Ring color (alpha 0 disables the ring)
        width: Stroke width in pixels (0 disables the ring)
    """

    color: Rgba = TRANSPARENT
    width: float = 0.0

    def __post_init__(self):
        """Validate border width."""
        if self.width < 0:
            raise InvalidBorder(f"border width must be >= 0, got {self.width}")

    @property
    def is_active(self) -> bool:
        """True when a ring should actually be drawn."""
        return self.width > 0 and not self.color.is_transparent


@dataclass(frozen=True)
class FitTransform:
    """
    Maps source-image pixel space into viewport pixel space.

    x_view = x_src * scale + offset_x
    y_view = y_src * scale + offset_y
    """

    scale: float
    offset_x: float
    offset_y: float

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """Map a source-space point into viewport space."""
        return (x * self.scale + self.offset_x, y * self.scale + self.offset_y)

    def scaled_size(self, source_width: int, source_height: int) -> Tuple[float, float]:
        """Size of the source image after scaling."""
        return (source_width * self.scale, source_height * self.scale)

    def as_affine(self) -> Tuple[Tuple[float, float, float], Tuple[float, float, float]]:
        """2x3 affine matrix rows (for cv2.warpAffine)."""
        return (
            (self.scale, 0.0, self.offset_x),
            (0.0, self.scale, self.offset_y),
        )

    def to_dict(self) -> Dict[str, float]:
        return {"scale": self.scale, "offset_x": self.offset_x, "offset_y": self.offset_y}


@dataclass(frozen=True)
class CircleGeometry:
    """
    Circle inscribed in the viewport, inset by the border width.

    Attributes:
        center_x: Circle center x (viewport width / 2)
        center_y: Circle center y (viewport height / 2)
        bounds_radius: Half the shorter viewport side
        border_width: Inset applied to the clip radius

    Invariants:
        - radius is derived, never stored
        - radius >= 0 even when the border is wider than the circle
    """

    center_x: float
    center_y: float
    bounds_radius: float
    border_width: float = 0.0

    @property
    def center(self) -> Tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def radius(self) -> float:
        """Clip radius, clamped to zero."""
        return max(0.0, self.bounds_radius - self.border_width)

    def contains_point(self, point: Tuple[float, float]) -> bool:
        """True if the point lies inside (or on) the clip circle."""
        dx = point[0] - self.center_x
        dy = point[1] - self.center_y
        return dx * dx + dy * dy <= self.radius * self.radius

    def to_dict(self) -> Dict[str, Any]:
        return {
            "center": [self.center_x, self.center_y],
            "radius": self.radius,
            "bounds_radius": self.bounds_radius,
            "border_width": self.border_width,
        }


@dataclass(frozen=True)
class StrokeCommand:
    """
    Ring stroke to draw on top of the clipped image.

    The stroke is centered on `radius`, so it spans
    [radius - stroke_width / 2, radius + stroke_width / 2].
    """

    center_x: float
    center_y: float
    radius: float
    stroke_width: float
    color: Rgba

    @property
    def center(self) -> Tuple[float, float]:
        return (self.center_x, self.center_y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "center": [self.center_x, self.center_y],
            "radius": self.radius,
            "stroke_width": self.stroke_width,
            "color": self.color.to_hex(),
        }
