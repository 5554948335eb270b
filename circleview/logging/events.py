"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: render, image, config, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - render.*: Composite building and drawing
    - image.*: Source image I/O
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Render Events ==========
    COMPOSITE_BUILT = "render.composite.built"
    """Composite descriptor computed (memo miss)."""

    CACHE_HIT = "render.cache.hit"
    """Composite descriptor served from the renderer memo."""

    CACHE_INVALIDATED = "render.cache.invalidated"
    """Renderer memo cleared."""

    RENDER_SKIPPED = "render.skipped"
    """Draw requested without a source image or size; nothing drawn."""

    RENDER_COMPLETED = "render.completed"
    """Descriptor executed on a surface."""

    # ========== Image Events ==========
    IMAGE_LOADED = "image.loaded"
    """Source image decoded from disk."""

    IMAGE_SAVED = "image.saved"
    """Rendered image written to disk."""

    ALPHA_DROPPED = "image.alpha_dropped"
    """Output format cannot store transparency."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """View configuration loaded."""

    # ========== Error Events ==========
    INVALID_DIMENSION_ERROR = "error.invalid_dimension"
    """Non-positive width or height supplied."""

    INVALID_BORDER_ERROR = "error.invalid_border"
    """Negative border width supplied."""

    CONFIG_ERROR = "error.config"
    """Configuration or arguments could not be parsed."""

    IMAGE_IO_ERROR = "error.image_io"
    """Image file could not be read or written."""

