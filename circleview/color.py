"""
Color Value
===========

Immutable RGBA color with the parsers a host styling layer needs.

Design:
- Frozen dataclass (hashable, usable as a memo key)
- Channels are integers in [0, 255]
- Hex RGB parsing delegated to supervision.Color
"""

from dataclasses import dataclass
from typing import Tuple, Union

import supervision as sv


@dataclass(frozen=True)
class Rgba:
    """
    Immutable RGBA color.

    Attributes:
        r: Red channel [0, 255]
        g: Green channel [0, 255]
        b: Blue channel [0, 255]
        a: Alpha channel [0, 255] (0 = fully transparent)

    Example:
        >>> Rgba.from_hex("#ff000080")
        Rgba(r=255, g=0, b=0, a=128)
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        """Validate channel ranges."""
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Color channel '{name}' must be int, got {type(value).__name__}")
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel '{name}' must be in [0, 255], got {value}")

    @property
    def is_transparent(self) -> bool:
        """True when the alpha channel is zero."""
        return self.a == 0

    @property
    def alpha_fraction(self) -> float:
        """Alpha as a float in [0.0, 1.0]."""
        return self.a / 255.0

    def as_rgb(self) -> Tuple[int, int, int]:
        return self.to_sv_color().as_rgb()

    def as_rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_sv_color(self) -> sv.Color:
        """Drop alpha and convert to a supervision Color."""
        return sv.Color(r=self.r, g=self.g, b=self.b)

    def to_hex(self) -> str:
        """Serialize as '#rrggbbaa'."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    @classmethod
    def from_hex(cls, value: str) -> "Rgba":
        """
        Parse '#rgb', '#rrggbb' or '#rrggbbaa'.

        Raises:
            ValueError: If the string is not a valid hex color
        """
        text = value.strip()
        if not text.startswith("#"):
            text = f"#{text}"
        digits = text[1:]

        alpha = 255
        if len(digits) == 8:
            try:
                alpha = int(digits[6:], 16)
            except ValueError as e:
                raise ValueError(f"Invalid hex color: {value}") from e
            digits = digits[:6]
        elif len(digits) not in (3, 6):
            raise ValueError(
                f"Invalid hex color: {value}. "
                f"Expected #rgb, #rrggbb or #rrggbbaa"
            )

        try:
            rgb = sv.Color.from_hex(f"#{digits}")
        except ValueError as e:
            raise ValueError(f"Invalid hex color: {value}") from e
        return cls(r=rgb.r, g=rgb.g, b=rgb.b, a=alpha)

    @classmethod
    def from_argb_int(cls, value: int) -> "Rgba":
        """Unpack a 32-bit 0xAARRGGBB color int (signed or unsigned)."""
        packed = value & 0xFFFFFFFF
        return cls(
            r=(packed >> 16) & 0xFF,
            g=(packed >> 8) & 0xFF,
            b=packed & 0xFF,
            a=(packed >> 24) & 0xFF,
        )

    @classmethod
    def coerce(cls, value: Union["Rgba", str, int]) -> "Rgba":
        """Accept an Rgba, a hex string or a packed ARGB int."""
        if isinstance(value, Rgba):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_argb_int(value)
        raise ValueError(f"Unsupported color value: {value!r}")


TRANSPARENT = Rgba(0, 0, 0, 0)
