"""
Raster Surface Module
=====================

Executes CompositeDescriptors on an RGBA numpy canvas.

Design:
- Surface protocol: the two primitives a host graphics surface needs
  (image-filled circle, circle stroke)
- RasterSurface: OpenCV implementation (warpAffine + anti-aliased masks)
- Straight-alpha "over" compositing in float32
"""

from typing import Protocol, Tuple

import cv2
import numpy as np

from circleview.color import Rgba, TRANSPARENT
from circleview.errors import InvalidDimension
from circleview.geometry import CircleGeometry, FitMode, FitTransform, StrokeCommand
from circleview.geometry.shapes import require_positive
from circleview.image import SourceImage
from circleview.rendering.renderer import CompositeDescriptor

# Fixed-point bits for sub-pixel circle centers/radii in cv2.circle
SHIFT = 4
_ONE = 1 << SHIFT


def _fixed(value: float) -> int:
    return int(round(value * _ONE))


def _fixed_center(center: Tuple[float, float]) -> Tuple[int, int]:
    # Geometry uses pixel-edge coordinates, OpenCV uses pixel centers
    return (_fixed(center[0] - 0.5), _fixed(center[1] - 0.5))


class Surface(Protocol):
    """Host drawing primitives consumed by execute_composite()."""

    def fill_circle(
        self,
        source: SourceImage,
        transform: FitTransform,
        clip: CircleGeometry,
        fit_mode: FitMode = FitMode.COVER,
    ) -> None: ...

    def stroke_circle(self, stroke: StrokeCommand) -> None: ...


def execute_composite(
    surface: Surface,
    descriptor: CompositeDescriptor,
    source: SourceImage,
) -> None:
    """Run a descriptor's drawing commands on any Surface."""
    surface.fill_circle(source, descriptor.transform, descriptor.clip, descriptor.fit_mode)
    if descriptor.stroke is not None:
        surface.stroke_circle(descriptor.stroke)


class RasterSurface:
    """
    RGBA canvas backed by a HxWx4 uint8 array.

    Usage:
        surface = RasterSurface(200, 200)
        surface.execute(descriptor, image)
        Image.fromarray(surface.pixels).save("avatar.png")
    """

    def __init__(self, width: int, height: int, background: Rgba = TRANSPARENT):
        """
        Args:
            width: Canvas width (pixels)
            height: Canvas height (pixels)
            background: Fill color for clear()
        """
        require_positive("surface width", width)
        require_positive("surface height", height)
        self.width = int(width)
        self.height = int(height)
        self.background = background
        self.pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        self.clear()

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return (self.width, self.height)

    def clear(self) -> None:
        self.pixels[:] = self.background.as_rgba()

    def execute(self, descriptor: CompositeDescriptor, source: SourceImage) -> np.ndarray:
        """
        Draw a descriptor and return the canvas.

        Raises:
            InvalidDimension: If the descriptor viewport differs from the canvas
        """
        if descriptor.viewport.size != self.size:
            raise InvalidDimension(
                f"descriptor viewport {descriptor.viewport.size} "
                f"does not match surface size {self.size}"
            )
        execute_composite(self, descriptor, source)
        return self.pixels

    def fill_circle(
        self,
        source: SourceImage,
        transform: FitTransform,
        clip: CircleGeometry,
        fit_mode: FitMode = FitMode.COVER,
    ) -> None:
        """
        Draw the transformed source image inside the clip circle.

        Cover mode clamps edge pixels (like a clamped bitmap shader);
        contain mode leaves the letterbox transparent.
        """
        if clip.radius <= 0:
            return

        # Shift the offset so pixel centers (not corners) map onto each other
        half_pixel = 0.5 * (transform.scale - 1.0)
        matrix = np.array(transform.as_affine(), dtype=np.float64)
        matrix[:, 2] += half_pixel

        # Interpolate premultiplied color so transparent texels add no fringe
        premultiplied = source.pixels.astype(np.float32) / 255.0
        premultiplied[..., :3] *= premultiplied[..., 3:4]

        border_mode = cv2.BORDER_REPLICATE if fit_mode is FitMode.COVER else cv2.BORDER_CONSTANT
        warped = cv2.warpAffine(
            premultiplied,
            matrix,
            (self.width, self.height),
            flags=cv2.INTER_LINEAR,
            borderMode=border_mode,
            borderValue=(0, 0, 0, 0),
        )

        mask = np.zeros((self.height, self.width), dtype=np.uint8)
        cv2.circle(
            mask,
            _fixed_center(clip.center),
            _fixed(clip.radius),
            255,
            thickness=-1,
            lineType=cv2.LINE_AA,
            shift=SHIFT,
        )

        coverage = np.clip(warped[..., 3], 0.0, 1.0)
        safe = np.where(coverage > 0.0, coverage, 1.0)
        color = np.clip(warped[..., :3] / safe[..., None], 0.0, 1.0)
        alpha = coverage * (mask.astype(np.float32) / 255.0)
        self._blend_over(color, alpha)

    def stroke_circle(self, stroke: StrokeCommand) -> None:
        """Draw an anti-aliased ring with the stroke color's alpha."""
        thickness = int(round(stroke.stroke_width))
        if thickness <= 0 or stroke.color.is_transparent:
            return

        mask = np.zeros((self.height, self.width), dtype=np.uint8)
        cv2.circle(
            mask,
            _fixed_center(stroke.center),
            _fixed(stroke.radius),
            255,
            thickness=thickness,
            lineType=cv2.LINE_AA,
            shift=SHIFT,
        )

        rgb = np.empty((self.height, self.width, 3), dtype=np.float32)
        rgb[:] = np.array(stroke.color.as_rgb(), dtype=np.float32) / 255.0
        alpha = (mask.astype(np.float32) / 255.0) * stroke.color.alpha_fraction
        self._blend_over(rgb, alpha)

    def _blend_over(self, rgb: np.ndarray, alpha: np.ndarray) -> None:
        """Composite a straight-alpha layer over the canvas."""
        dst = self.pixels.astype(np.float32) / 255.0
        dst_alpha = dst[..., 3]

        out_alpha = alpha + dst_alpha * (1.0 - alpha)
        safe_alpha = np.where(out_alpha > 0, out_alpha, 1.0)[..., None]
        out_rgb = (
            rgb * alpha[..., None]
            + dst[..., :3] * (dst_alpha * (1.0 - alpha))[..., None]
        ) / safe_alpha

        out = np.concatenate([out_rgb, out_alpha[..., None]], axis=-1)
        self.pixels = np.clip(np.rint(out * 255.0), 0, 255).astype(np.uint8)
