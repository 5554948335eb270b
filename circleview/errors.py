"""
Error Taxonomy
==============

All failures are local validation errors raised synchronously to the
immediate caller. There is nothing to retry.

- InvalidDimension: non-positive width/height supplied
- InvalidBorder: negative border width
- MissingSource: render requested without a source image
"""


class CircleViewError(ValueError):
    """Base class for circleview validation errors."""


class InvalidDimension(CircleViewError):
    """A width or height was zero or negative."""


class InvalidBorder(CircleViewError):
    """A border width was negative."""


class MissingSource(CircleViewError):
    """
    Render requested with no source image.

    Hosts should treat this as "draw nothing" rather than surfacing it.
    """
