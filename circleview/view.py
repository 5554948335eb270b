"""
Circle Image View
=================

Thin host adapter: holds the styleable attributes, the current image and
size, and calls into CircularImageRenderer on every draw. Pixel work is
delegated to a Surface.

Design:
- Composition over inheritance (no toolkit base class)
- Setters mark the view dirty (needs_redraw), the host decides when to draw
- Missing image or size => draw nothing
"""

from dataclasses import replace
from typing import Optional, Tuple, Union

import numpy as np

from circleview.color import Rgba
from circleview.config import ViewConfig
from circleview.errors import InvalidBorder, MissingSource
from circleview.geometry import FitMode, Viewport
from circleview.image import SourceImage
from circleview.logging import LogEvent, StructuredLogger
from circleview.rendering import (
    CircularImageRenderer,
    CompositeDescriptor,
    RasterSurface,
    Surface,
    execute_composite,
)


class CircleImageView:
    """
    Circular image widget adapter.

    Usage:
        view = CircleImageView(ViewConfig(border_width=4, border_color=Rgba(255, 255, 255)))
        view.set_image(load_source_image("avatar.jpg"))
        view.set_size(200, 200)
        pixels = view.render()
    """

    def __init__(
        self,
        config: Optional[ViewConfig] = None,
        renderer: Optional[CircularImageRenderer] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.config = config or ViewConfig()
        self.renderer = renderer or CircularImageRenderer(fit_mode=self.config.fit_mode, logger=logger)
        self.logger = logger

        self._image: Optional[SourceImage] = None
        self._size: Optional[Tuple[int, int]] = None
        self.needs_redraw = True

    # ========== Attributes ==========

    @property
    def image(self) -> Optional[SourceImage]:
        return self._image

    @property
    def size(self) -> Optional[Tuple[int, int]]:
        return self._size

    @property
    def border_color(self) -> Rgba:
        return self.config.border_color

    @property
    def border_width(self) -> float:
        return self.config.border_width

    @property
    def fit_mode(self) -> FitMode:
        return self.config.fit_mode

    def set_image(self, image: Optional[SourceImage]) -> None:
        self._image = image
        self.invalidate()

    def set_size(self, width: int, height: int) -> None:
        """Layout callback; validated lazily at draw time via Viewport."""
        self._size = (int(width), int(height))
        self.invalidate()

    def set_border_color(self, color: Union[Rgba, str, int]) -> None:
        """Accepts Rgba, '#rrggbb[aa]' or a packed 0xAARRGGBB int."""
        self.config = replace(self.config, border_color=Rgba.coerce(color))
        self.invalidate()

    def set_border_color_resource(self, name: str) -> None:
        """
        Set the border color from the configured palette.

        Raises:
            KeyError: If the palette has no such color
        """
        if name not in self.config.palette:
            raise KeyError(f"Unknown color resource: {name}")
        self.set_border_color(self.config.palette[name])

    def set_border_width(self, width: float) -> None:
        if width < 0:
            raise InvalidBorder(f"border width must be >= 0, got {width}")
        self.config = replace(self.config, border_width=float(width))
        self.invalidate()

    def set_fit_mode(self, fit_mode: Union[FitMode, str]) -> None:
        self.config = replace(self.config, fit_mode=FitMode.parse(fit_mode))
        self.invalidate()

    def invalidate(self) -> None:
        """Request a redraw on the next draw cycle."""
        self.needs_redraw = True

    # ========== Drawing ==========

    def composite(self) -> Optional[CompositeDescriptor]:
        """
        Current descriptor, or None when there is nothing to draw.

        Raises:
            InvalidDimension: If the current size is not positive
        """
        if self._size is None:
            self._log_skipped("no size")
            return None

        try:
            return self.renderer.render_composite(
                self._image,
                Viewport(*self._size),
                self.config.border,
                self.config.fit_mode,
            )
        except MissingSource:
            self._log_skipped("no source image")
            return None

    def draw(self, surface: Surface) -> Optional[CompositeDescriptor]:
        """
        Draw onto a host surface.

        Returns:
            The executed descriptor, or None if nothing was drawn
        """
        descriptor = self.composite()
        if descriptor is not None:
            execute_composite(surface, descriptor, self._image)
            if self.logger:
                self.logger.debug(
                    event=LogEvent.RENDER_COMPLETED,
                    message="Drew circular composite",
                    metadata={'viewport': list(descriptor.viewport.size)},
                )
        self.needs_redraw = False
        return descriptor

    def render(self) -> Optional[np.ndarray]:
        """Draw into a fresh transparent RasterSurface and return its pixels."""
        if self._size is None or self._image is None:
            self._log_skipped("no source image" if self._image is None else "no size")
            self.needs_redraw = False
            return None

        surface = RasterSurface(*self._size)
        self.draw(surface)
        return surface.pixels

    def _log_skipped(self, reason: str) -> None:
        if self.logger:
            self.logger.debug(
                event=LogEvent.RENDER_SKIPPED,
                message=f"Nothing to draw: {reason}",
            )
