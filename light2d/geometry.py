"""2D shapes and boolean operations for emissive signed distance fields."""

from __future__ import annotations

import math
from typing import Callable, NamedTuple, Sequence

import numpy as np
import numpy.typing as npt

from . import primitives as sdf
from ._math import as_points, rotate2
from .errors import ShapeError

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]


class Sample(NamedTuple):
    """Result of a distance query.

    ``distance`` is the signed distance (negative inside, positive outside)
    and ``emissive`` the self-emission of the surface that supplied it.  Both
    have the batch shape of the query points.
    """

    distance: _Array
    emissive: _Array


_SampleFunc = Callable[[_Array], Sample]
_DistFunc = Callable[[_Array], _Array]


# ===========================================================================
# Base class
# ===========================================================================

class Shape2D:
    """Base class for 2D emissive signed-distance shapes.

    A ``Shape2D`` wraps a callable ``func(p) -> Sample`` where *p* is a
    ``(..., 2)`` array of points.  Shapes form a tree: composites and
    modifiers take ownership of the shapes they are built from, and a shape
    can be owned by at most one parent.

    Implements:
    - Boolean operations: :meth:`union`, :meth:`subtract`, :meth:`intersect`
    - Modifiers:          :meth:`round`, :meth:`onion`
    - Transforms:         :meth:`translate`, :meth:`scale`, :meth:`rotate`
    """

    def __init__(self, func: _SampleFunc, *children: Shape2D) -> None:
        for i, child in enumerate(children):
            if not isinstance(child, Shape2D):
                raise ShapeError(f"expected a Shape2D, got {type(child).__name__}")
            if child._parent is not None:
                raise ShapeError(f"{type(child).__name__} already belongs to another shape")
            if any(child is other for other in children[:i]):
                raise ShapeError(f"{type(child).__name__} passed twice to the same shape")
        for child in children:
            child._parent = self
        self._func = func
        self._parent: Shape2D | None = None
        self.children: tuple[Shape2D, ...] = children

    def sdf(self, p) -> Sample:
        """Evaluate the shape at *p* (shape ``(..., 2)``)."""
        return self._func(as_points(p))

    def __call__(self, p) -> Sample:
        return self.sdf(p)

    @property
    def owned(self) -> bool:
        """True once a composite or modifier has taken this shape."""
        return self._parent is not None

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, other: Shape2D) -> Union:
        """Return the union of this shape and *other*."""
        return Union(self, other)

    def subtract(self, other: Shape2D) -> Subtract:
        """Carve *other* out of this shape."""
        return Subtract(self, other)

    def intersect(self, other: Shape2D) -> Intersect:
        """Return the intersection of this shape and *other*."""
        return Intersect(self, other)

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def round(self, rad: float) -> Shape2D:
        """Round the surface outward by *rad*."""
        def _sdf(p: _Array) -> Sample:
            s = self.sdf(p)
            return Sample(sdf.sdRounded(s.distance, rad), s.emissive)

        return Shape2D(_sdf, self)

    def onion(self, thickness: float) -> Shape2D:
        """Turn the solid into a hollow shell of *thickness*."""
        def _sdf(p: _Array) -> Sample:
            s = self.sdf(p)
            return Sample(sdf.sdOnion(s.distance, thickness), s.emissive)

        return Shape2D(_sdf, self)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translate(self, tx: float, ty: float) -> Shape2D:
        """Translate by ``(tx, ty)``."""
        t = np.array([tx, ty], dtype=float)
        return Shape2D(lambda p: self.sdf(p - t), self)

    def scale(self, s: float) -> Shape2D:
        """Uniformly scale about the origin by factor *s* (``s > 0``)."""
        if not s > 0.0:
            raise ShapeError(f"scale factor must be positive, got {s}")

        def _sdf(p: _Array) -> Sample:
            r = self.sdf(p / s)
            return Sample(r.distance * s, r.emissive)

        return Shape2D(_sdf, self)

    def rotate(self, angle_rad: float) -> Shape2D:
        """Rotate about the origin by *angle_rad* radians (counter-clockwise)."""
        return Shape2D(lambda p: self.sdf(rotate2(p, -angle_rad)), self)


# ===========================================================================
# Primitive shapes
# ===========================================================================

def _check_emissive(emissive: float) -> float:
    emissive = float(emissive)
    if not math.isfinite(emissive) or emissive < 0.0:
        raise ShapeError(f"emissive must be a finite value >= 0, got {emissive}")
    return emissive


def _vec(v: Sequence[float], name: str) -> _Array:
    arr = np.array(v, dtype=float)
    if arr.shape != (2,):
        raise ShapeError(f"{name} must be an (x, y) pair, got shape {arr.shape}")
    return arr


class Primitive2D(Shape2D):
    """A leaf shape: one distance formula plus a constant *emissive*."""

    def __init__(self, func: _DistFunc, emissive: float) -> None:
        self.emissive = _check_emissive(emissive)
        e = self.emissive

        def _sdf(p: _Array) -> Sample:
            d = func(p)
            return Sample(d, np.full(np.shape(d), e))

        super().__init__(_sdf)


class Circle(Primitive2D):
    """Circle of *radius* centred at *center*."""

    def __init__(self, center: Sequence[float], radius: float, emissive: float = 1.0) -> None:
        c = _vec(center, "center")
        r = float(radius)
        super().__init__(lambda p: sdf.sdCircle(p, c, r), emissive)
        self.center = c
        self.radius = r


class Plane(Primitive2D):
    """Half-plane through *point*; *normal* points outward and must be unit length."""

    def __init__(self, point: Sequence[float], normal: Sequence[float], emissive: float = 1.0) -> None:
        o = _vec(point, "point")
        n = _vec(normal, "normal")
        super().__init__(lambda p: sdf.sdPlane(p, o, n), emissive)
        self.point = o
        self.normal = n


class Capsule(Primitive2D):
    """Segment from *point_a* to *point_b* thickened by *radius*."""

    def __init__(
        self,
        point_a: Sequence[float],
        point_b: Sequence[float],
        radius: float,
        emissive: float = 1.0,
    ) -> None:
        a = _vec(point_a, "point_a")
        b = _vec(point_b, "point_b")
        r = float(radius)
        super().__init__(lambda p: sdf.sdCapsule(p, a, b, r), emissive)
        self.point_a = a
        self.point_b = b
        self.radius = r


class Rectangle(Primitive2D):
    """Rectangle centred at *center*, rotated by *theta*, with half-extents *sx*, *sy*."""

    def __init__(
        self,
        center: Sequence[float],
        theta: float,
        sx: float,
        sy: float,
        emissive: float = 1.0,
    ) -> None:
        c = _vec(center, "center")
        th = float(theta)
        half = np.array([sx, sy], dtype=float)
        super().__init__(lambda p: sdf.sdOrientedRect(p, c, th, half), emissive)
        self.center = c
        self.theta = th
        self.half_size = half


class Triangle(Primitive2D):
    """Triangle from three 2-D vertices, in either winding order."""

    def __init__(
        self,
        p0: Sequence[float],
        p1: Sequence[float],
        p2: Sequence[float],
        emissive: float = 1.0,
    ) -> None:
        v0 = _vec(p0, "p0")
        v1 = _vec(p1, "p1")
        v2 = _vec(p2, "p2")
        super().__init__(lambda p: sdf.sdTriangle(p, v0, v1, v2), emissive)
        self.vertices = (v0, v1, v2)


# ===========================================================================
# Boolean operation classes
# ===========================================================================

class Union(Shape2D):
    """Union of two shapes: the nearer surface wins, emission included.

    Ties go to *b*.
    """

    def __init__(self, a: Shape2D, b: Shape2D) -> None:
        def _sdf(p: _Array) -> Sample:
            s1 = a.sdf(p)
            s2 = b.sdf(p)
            first = s1.distance < s2.distance
            return Sample(
                np.where(first, s1.distance, s2.distance),
                np.where(first, s1.emissive, s2.emissive),
            )

        super().__init__(_sdf, a, b)


class Intersect(Shape2D):
    """Intersection of two shapes: the farther surface bounds the result.

    The emission comes from the same child as the distance.  Ties go to *b*.
    """

    def __init__(self, a: Shape2D, b: Shape2D) -> None:
        def _sdf(p: _Array) -> Sample:
            s1 = a.sdf(p)
            s2 = b.sdf(p)
            first = s1.distance > s2.distance
            return Sample(
                np.where(first, s1.distance, s2.distance),
                np.where(first, s1.emissive, s2.emissive),
            )

        super().__init__(_sdf, a, b)


class Subtract(Shape2D):
    """Carve *cutter* out of *base*.

    The cutter only removes geometry; the emission is always the base's.
    """

    def __init__(self, base: Shape2D, cutter: Shape2D) -> None:
        def _sdf(p: _Array) -> Sample:
            s1 = base.sdf(p)
            s2 = cutter.sdf(p)
            return Sample(np.maximum(s1.distance, -s2.distance), s1.emissive)

        super().__init__(_sdf, base, cutter)


def union(a: Shape2D, b: Shape2D) -> Union:
    """Take ownership of *a* and *b* and return their union."""
    return Union(a, b)


def intersect(a: Shape2D, b: Shape2D) -> Intersect:
    """Take ownership of *a* and *b* and return their intersection."""
    return Intersect(a, b)


def subtract(a: Shape2D, b: Shape2D) -> Subtract:
    """Take ownership of *a* and *b* and return *a* with *b* carved out."""
    return Subtract(a, b)
