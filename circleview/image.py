"""
Source Image Module
===================

Read-only RGBA pixel buffer plus Pillow-backed load/save helpers.

The renderer only ever reads width/height; the pixel buffer is consumed
by the surface when the composite is executed.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

import numpy as np
from PIL import Image

from circleview.errors import InvalidDimension
from circleview.logging import LogEvent, StructuredLogger


@dataclass(frozen=True, eq=False)
class SourceImage:
    """
    Immutable source raster.

    Attributes:
        pixels: HxWx4 uint8 RGBA array (stored as a read-only copy)

    Invariants:
        - width > 0, height > 0
        - 4 channels, uint8
    """

    pixels: np.ndarray
    name: Optional[str] = field(default=None)

    def __post_init__(self):
        """Validate pixel buffer."""
        if not isinstance(self.pixels, np.ndarray):
            raise TypeError(f"pixels must be np.ndarray, got {type(self.pixels)}")
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"pixels must be HxWx4 RGBA array, got shape {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"pixels must be uint8, got {self.pixels.dtype}")
        height, width = self.pixels.shape[:2]
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"source image must be non-empty, got {width}x{height}")

        # Freeze a private copy, the caller keeps a writable array
        pixels = np.ascontiguousarray(self.pixels).copy()
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return (self.width, self.height)

    @classmethod
    def from_array(cls, array: np.ndarray, name: Optional[str] = None) -> "SourceImage":
        """
        Build from a gray (HxW), RGB (HxWx3) or RGBA (HxWx4) uint8 array.

        Missing alpha is filled opaque. The input array is copied.
        """
        array = np.asarray(array)
        if array.dtype != np.uint8:
            raise ValueError(f"array must be uint8, got {array.dtype}")

        if array.ndim == 2:
            array = np.stack([array] * 3, axis=-1)
        if array.ndim == 3 and array.shape[2] == 3:
            alpha = np.full(array.shape[:2] + (1,), 255, dtype=np.uint8)
            array = np.concatenate([array, alpha], axis=-1)

        return cls(pixels=array, name=name)

    @classmethod
    def from_pil(cls, image: Image.Image, name: Optional[str] = None) -> "SourceImage":
        """Convert any Pillow image to an RGBA SourceImage."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(pixels=np.array(image), name=name)


def load_source_image(
    path: Union[str, Path],
    logger: Optional[StructuredLogger] = None,
) -> SourceImage:
    """
    Decode an image file into a SourceImage.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    with Image.open(path) as img:
        source = SourceImage.from_pil(img, name=path.name)

    if logger is not None:
        logger.info(
            event=LogEvent.IMAGE_LOADED,
            message=f"Loaded {path.name}",
            metadata={'path': str(path), 'size': list(source.size)},
        )
    return source


def save_image(
    pixels: np.ndarray,
    path: Union[str, Path],
    logger: Optional[StructuredLogger] = None,
) -> Path:
    """Write an RGBA array to disk (format from the file extension)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    image = Image.fromarray(np.ascontiguousarray(pixels))
    if path.suffix.lower() in {".jpg", ".jpeg"}:
        # JPEG has no alpha channel
        if image.mode == "RGBA" and logger is not None:
            logger.warning(
                event=LogEvent.ALPHA_DROPPED,
                message=f"{path.suffix} output has no transparency, alpha discarded",
                metadata={'path': str(path)},
            )
        image = image.convert("RGB")
    image.save(path)

    if logger is not None:
        logger.info(
            event=LogEvent.IMAGE_SAVED,
            message=f"Saved {path.name}",
            metadata={'path': str(path), 'size': [image.width, image.height]},
        )
    return path
