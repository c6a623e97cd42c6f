"""Shared vector helpers used by the light2d primitives, shapes and integrator.

This module provides:

* **Type alias**: :data:`_F`
* **Vector constructors**: :func:`vec2`, :func:`as_points`
* **Math helpers**: :func:`length`, :func:`dot`, :func:`dot2`, :func:`cross2`,
  :func:`clamp`, :func:`rotate2`
* **Segment projection**: :func:`segment_offset`

Every function works on ``numpy.ndarray`` objects and broadcasts over
arbitrary leading batch dimensions.  A "point array" has shape ``(..., 2)``.

Not meant to be imported directly by end users.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "vec2", "as_points",
    "length", "dot", "dot2", "cross2", "clamp", "rotate2",
    "segment_offset",
]


# ===========================================================================
# Vector constructors
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


def as_points(p) -> _F:
    """Coerce *p* to a float64 ``(..., 2)`` point array.

    A bare ``(x, y)`` pair becomes shape ``(2,)``; anything whose last axis
    is not 2 is rejected.
    """
    arr = np.asarray(p, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != 2:
        raise ValueError(f"expected points with a trailing axis of 2, got shape {arr.shape}")
    return arr


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.sqrt(dot2(v))


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def dot2(a: _F) -> _F:
    """Squared length: ``dot(a, a)``."""
    return dot(a, a)


def cross2(a: _F, b: _F) -> _F:
    """z-component of the 2-D cross product ``a × b``."""
    return a[..., 0] * b[..., 1] - a[..., 1] * b[..., 0]


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


def rotate2(p: _F, angle: float) -> _F:
    """Rotate points *p* counter-clockwise about the origin by *angle* radians."""
    c = np.cos(angle)
    s = np.sin(angle)
    return vec2(c * p[..., 0] - s * p[..., 1], s * p[..., 0] + c * p[..., 1])


# ===========================================================================
# Segment projection
# ===========================================================================

def segment_offset(p: _F, a: _F, b: _F) -> _F:
    """Vector from the closest point of segment *ab* to *p*.

    The projection parameter is clamped to ``[0, 1]``.  A zero-length
    segment collapses to the point *a*, so the offset is simply ``p - a``.
    """
    pa = p - a
    ba = b - a
    denom = dot2(ba)
    if denom == 0.0:
        return pa
    h = np.asarray(clamp(dot(pa, ba) / denom, 0.0, 1.0))
    return pa - ba * h[..., None]
