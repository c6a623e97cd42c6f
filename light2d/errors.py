"""Exception types raised by light2d."""

from __future__ import annotations


class Light2DError(Exception):
    """Base class for every error raised by light2d itself."""


class InvalidConfigError(Light2DError, ValueError):
    """Scene or render configuration rejected before any pixel work."""


class ShapeError(Light2DError, ValueError):
    """A shape was built with bad parameters or adopted by two parents."""


class EncodeError(Light2DError, ValueError):
    """A pixel buffer does not match the image dimensions handed to the sink."""
