"""
Configuration schema for CircleImageView.

Style attributes a host/styling layer populates before constructing the
view: border color, border width, fit mode and a palette of named colors
for resource-style lookups.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from circleview.color import Rgba, TRANSPARENT
from circleview.errors import InvalidBorder
from circleview.geometry import BorderSpec, FitMode


@dataclass(frozen=True)
class ViewConfig:
    """
    CircleImageView style attributes.

    Attributes:
        border_color: Ring color (default: fully transparent)
        border_width: Ring width in pixels (default: 0)
        fit_mode: Image fit mode (default: cover)
        palette: Named colors for set_border_color_resource()
    """

    border_color: Rgba = TRANSPARENT
    border_width: float = 0.0
    fit_mode: FitMode = FitMode.COVER
    palette: Dict[str, Rgba] = field(default_factory=dict)

    def __post_init__(self):
        """Validate view configuration."""
        if not isinstance(self.border_color, Rgba):
            raise ValueError(
                f"border_color must be Rgba, got {type(self.border_color).__name__}"
            )

        if self.border_width < 0:
            raise InvalidBorder(
                f"border_width must be >= 0, got {self.border_width}"
            )

        if not isinstance(self.fit_mode, FitMode):
            raise ValueError(
                f"fit_mode must be FitMode, got {type(self.fit_mode).__name__}"
            )

        for name, color in self.palette.items():
            if not isinstance(color, Rgba):
                raise ValueError(
                    f"Palette color '{name}' must be Rgba, got {type(color).__name__}"
                )

    @property
    def border(self) -> BorderSpec:
        return BorderSpec(color=self.border_color, width=self.border_width)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ViewConfig":
        """
        Build from a plain dict (colors as hex strings or ARGB ints).

        Raises:
            ValueError: If a value cannot be parsed
        """
        data = data or {}

        unknown = set(data) - {"border_color", "border_width", "fit_mode", "palette"}
        if unknown:
            raise ValueError(f"Unknown view config keys: {sorted(unknown)}")

        palette_data = data.get("palette") or {}
        if not isinstance(palette_data, dict):
            raise ValueError(f"palette must be a mapping, got {type(palette_data).__name__}")
        palette = {str(name): Rgba.coerce(value) for name, value in palette_data.items()}

        border_color_data = data.get("border_color")
        if border_color_data is None:
            border_color = TRANSPARENT
        elif isinstance(border_color_data, str) and border_color_data in palette:
            border_color = palette[border_color_data]
        else:
            border_color = Rgba.coerce(border_color_data)

        try:
            border_width = float(data.get("border_width", 0.0))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid border_width: {data.get('border_width')!r}") from e

        return cls(
            border_color=border_color,
            border_width=border_width,
            fit_mode=FitMode.parse(data.get("fit_mode", FitMode.COVER)),
            palette=palette,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "ViewConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            border_color: "accent"      # palette name or hex
            border_width: 4
            fit_mode: "cover"
            palette:
              accent: "#ff5722"
              overlay: "#00000080"

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"View config in {yaml_path} must be a mapping")

        return cls.from_dict(data or {})
