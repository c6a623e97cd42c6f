"""2-D SDF math primitives for the light2d package.

Every function here is a pure distance formula: it takes a point array *p*
of shape ``(..., 2)`` plus the shape parameters and returns the signed
distances with shape ``(...,)``.  They know nothing about emission; the
classes in :mod:`light2d.geometry` pair them with an emissive value.

Formulas follow Inigo Quilez's 2-D distance function reference:
https://iquilezles.org/articles/distfunctions2d/
"""

from __future__ import annotations

import numpy as np

from ._math import _F, cross2, dot, length, segment_offset, vec2

__all__ = [
    "sdCircle",
    "sdPlane",
    "sdSegment",
    "sdCapsule",
    "sdOrientedRect",
    "sdTriangle",
    "sdRounded",
    "sdOnion",
]


# ===========================================================================
# 2-D primitive SDFs
# ===========================================================================

def sdCircle(p: _F, c: _F, r: float) -> _F:
    """Circle of radius *r* centred at *c*."""
    return length(p - c) - r


def sdPlane(p: _F, o: _F, n: _F) -> _F:
    """Half-plane through *o* whose outside lies along the unit normal *n*."""
    return dot(p - o, n)


def sdSegment(p: _F, a: _F, b: _F) -> _F:
    """Unsigned distance to the segment from *a* to *b*."""
    return length(segment_offset(p, a, b))


def sdCapsule(p: _F, a: _F, b: _F, r: float) -> _F:
    """Segment *ab* thickened by radius *r*."""
    return sdSegment(p, a, b) - r


def sdOrientedRect(p: _F, c: _F, theta: float, b: _F) -> _F:
    """Rectangle centred at *c*, rotated by *theta*, with half-extents *b*.

    The query is rotated into the rectangle's frame by ``-theta`` and then
    measured against an axis-aligned box, which is exact both inside and
    outside.
    """
    q = p - c
    ct = np.cos(theta)
    st = np.sin(theta)
    dx = np.abs(q[..., 0] * ct + q[..., 1] * st) - b[0]
    dy = np.abs(q[..., 1] * ct - q[..., 0] * st) - b[1]
    outside = length(vec2(np.maximum(dx, 0.0), np.maximum(dy, 0.0)))
    return np.minimum(np.maximum(dx, dy), 0.0) + outside


def sdTriangle(p: _F, a: _F, b: _F, c: _F) -> _F:
    """Triangle with vertices *a*, *b*, *c* in either winding order.

    The magnitude is the distance to the nearest edge.  A point is inside
    when it lies strictly on the same side of all three directed edges.
    """
    d = np.minimum(np.minimum(sdSegment(p, a, b), sdSegment(p, b, c)), sdSegment(p, c, a))
    s0 = cross2(b - a, p - a)
    s1 = cross2(c - b, p - b)
    s2 = cross2(a - c, p - c)
    inside = ((s0 > 0.0) & (s1 > 0.0) & (s2 > 0.0)) | ((s0 < 0.0) & (s1 < 0.0) & (s2 < 0.0))
    return np.where(inside, -d, d)


# ===========================================================================
# Distance modifiers
# ===========================================================================

def sdRounded(d: _F, r: float) -> _F:
    """Grow a distance field outward by *r*, rounding its corners."""
    return d - r


def sdOnion(d: _F, thickness: float) -> _F:
    """Turn a solid into a shell of half-width *thickness* around its boundary."""
    return np.abs(d) - thickness

