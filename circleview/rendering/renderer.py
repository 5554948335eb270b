"""
Circular Image Renderer
=======================

Builds the CompositeDescriptor a host surface executes to draw a bitmap
clipped to a circle with an optional ring border.

Design:
- render_composite(): pure function, no hidden state
- build_descriptor(): same, from a (width, height) pair
- CircularImageRenderer: thin stateful wrapper memoizing the last
  descriptor between draws
- Memo keyed on (source size, viewport, border, fit mode); correctness
  never depends on it
"""

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional, Tuple

from circleview.errors import MissingSource
from circleview.geometry import (
    BorderSpec,
    CircleGeometry,
    FitMode,
    FitTransform,
    StrokeCommand,
    Viewport,
    compute_circle_geometry,
    compute_fit_transform,
    compute_stroke,
)
from circleview.image import SourceImage
from circleview.logging import LogEvent, StructuredLogger


@dataclass(frozen=True)
class CompositeDescriptor:
    """
    Drawing instructions for one circular composite.

    Attributes:
        viewport: Target viewport
        clip: Clip circle (center + derived radius)
        transform: Source-to-viewport transform
        fit_mode: Mode the transform was computed with
        stroke: Ring stroke, or None when the border is inactive
    """

    viewport: Viewport
    clip: CircleGeometry
    transform: FitTransform
    fit_mode: FitMode = FitMode.COVER
    stroke: Optional[StrokeCommand] = None

    @property
    def has_border(self) -> bool:
        return self.stroke is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'viewport': [self.viewport.width, self.viewport.height],
            'fit_mode': self.fit_mode.value,
            'clip': self.clip.to_dict(),
            'transform': self.transform.to_dict(),
            'stroke': self.stroke.to_dict() if self.stroke else None,
        }


def render_composite(
    source_image: Optional[SourceImage],
    viewport: Viewport,
    border_spec: Optional[BorderSpec] = None,
    fit_mode: FitMode = FitMode.COVER,
) -> CompositeDescriptor:
    """
    Compute the composite for a source image in a viewport.

    Args:
        source_image: Image to draw (None raises MissingSource)
        viewport: Target viewport
        border_spec: Ring style (default: no border)
        fit_mode: COVER (default) or CONTAIN

    Returns:
        CompositeDescriptor

    Raises:
        MissingSource: If source_image is None
        InvalidDimension: If any dimension is not positive
    """
    if source_image is None:
        raise MissingSource("render requested with no source image")

    return build_descriptor(source_image.size, viewport, border_spec or BorderSpec(), fit_mode)


def build_descriptor(
    source_size: Tuple[int, int],
    viewport: Viewport,
    border: BorderSpec,
    fit_mode: FitMode,
) -> CompositeDescriptor:
    """
    Compute the composite from a source size alone.

    The descriptor never depends on pixel content, so geometry can be
    inspected without decoding an image.
    """
    fit_mode = FitMode.parse(fit_mode)
    transform = compute_fit_transform(
        source_size[0], source_size[1], viewport.width, viewport.height, fit_mode
    )
    clip = compute_circle_geometry(viewport.width, viewport.height, border.width)

    return CompositeDescriptor(
        viewport=viewport,
        clip=clip,
        transform=transform,
        fit_mode=fit_mode,
        stroke=compute_stroke(clip, border),
    )


class CacheInfo(NamedTuple):
    hits: int
    misses: int


class CircularImageRenderer:
    """
    Memoizing wrapper around render_composite.

    Design:
    - Single-slot memo: the last descriptor is reused while
      (source size, viewport, border, fit mode) is unchanged
    - Not thread-safe (caller must serialize calls per instance)

    Usage:
        renderer = CircularImageRenderer()
        descriptor = renderer.render_composite(image, Viewport(200, 200), border)
        surface.execute(descriptor, image)
    """

    def __init__(
        self,
        fit_mode: FitMode = FitMode.COVER,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            fit_mode: Default fit mode for render_composite calls
            logger: Optional structured logger
        """
        self.fit_mode = FitMode.parse(fit_mode)
        self.logger = logger

        self._memo_key: Optional[Tuple] = None
        self._memo_value: Optional[CompositeDescriptor] = None
        self._hits = 0
        self._misses = 0

    def compute_fit_transform(
        self,
        source_width: int,
        source_height: int,
        viewport_width: int,
        viewport_height: int,
    ) -> FitTransform:
        return compute_fit_transform(
            source_width, source_height, viewport_width, viewport_height, self.fit_mode
        )

    def compute_circle_geometry(
        self,
        viewport_width: int,
        viewport_height: int,
        border_width: float = 0.0,
    ) -> CircleGeometry:
        return compute_circle_geometry(viewport_width, viewport_height, border_width)

    def render_composite(
        self,
        source_image: Optional[SourceImage],
        viewport: Viewport,
        border_spec: Optional[BorderSpec] = None,
        fit_mode: Optional[FitMode] = None,
    ) -> CompositeDescriptor:
        """
        Same contract as the module-level render_composite, memoized.

        Raises:
            MissingSource: If source_image is None
        """
        if source_image is None:
            raise MissingSource("render requested with no source image")

        border = border_spec or BorderSpec()
        mode = FitMode.parse(fit_mode) if fit_mode is not None else self.fit_mode
        key = (source_image.size, viewport, border, mode)

        if key == self._memo_key and self._memo_value is not None:
            self._hits += 1
            if self.logger:
                self.logger.debug(
                    event=LogEvent.CACHE_HIT,
                    message="Reused composite descriptor",
                    metadata={'viewport': list(viewport.size)},
                )
            return self._memo_value

        descriptor = build_descriptor(source_image.size, viewport, border, mode)
        self._memo_key = key
        self._memo_value = descriptor
        self._misses += 1

        if self.logger:
            self.logger.debug(
                event=LogEvent.COMPOSITE_BUILT,
                message="Built composite descriptor",
                metadata={
                    'source': list(source_image.size),
                    'viewport': list(viewport.size),
                    'fit_mode': mode.value,
                    'border': descriptor.has_border,
                },
            )
        return descriptor

    def cache_info(self) -> CacheInfo:
        """Memo hit/miss counters."""
        return CacheInfo(hits=self._hits, misses=self._misses)

    def invalidate(self) -> None:
        """Drop the memoized descriptor."""
        self._memo_key = None
        self._memo_value = None
        if self.logger:
            self.logger.debug(
                event=LogEvent.CACHE_INVALIDATED,
                message="Renderer memo cleared",
            )
