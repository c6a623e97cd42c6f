"""Tests for light2d geometry classes.

Every class in light2d.geometry is tested for:
- Correct instantiation
- sdf() returns correct sign and emission
- Boolean operations satisfy their min/max algebra and keep emission tied to
  the branch that supplied the distance
- Transform and modifier methods return new shapes
- Tree ownership: a shape can only be adopted once
"""

import numpy as np
import numpy.testing as npt
import pytest

from light2d import (
    Shape2D, Sample, ShapeError,
    Circle, Plane, Capsule, Rectangle, Triangle,
    Union, Intersect, Subtract,
    union, intersect, subtract,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _p(*xy) -> np.ndarray:
    """Single 2-D point as shape ``(1, 2)``."""
    return np.array([list(xy)], dtype=float)


def _grid(n: int = 16, lo: float = -6.0, hi: float = 6.0) -> np.ndarray:
    lin = np.linspace(lo, hi, n)
    Y, X = np.meshgrid(lin, lin, indexing="ij")
    return np.stack([X, Y], axis=-1)


def _pairs():
    """Fresh (a, b) shape pairs covering every primitive."""
    return [
        (Circle((0, 0), 2, 1.0), Circle((3, 0), 2, 0.5)),
        (Rectangle((0, 0), 0.4, 2, 1, 0.3), Triangle((-1, -1), (3, -1), (1, 3), 2.0)),
        (Capsule((-3, -3), (3, 3), 1, 0.7), Plane((0, 0), (0, 1), 0.2)),
    ]


# ===========================================================================
# Base class
# ===========================================================================

class TestShape2D:
    def test_sdf_returns_sample(self):
        s = Circle((0, 0), 1).sdf(_p(0, 0))
        assert isinstance(s, Sample)

    def test_call_is_sdf(self):
        c = Circle((0, 0), 1, 0.5)
        npt.assert_array_equal(c(_p(2, 0)).distance, c.sdf(_p(2, 0)).distance)

    def test_shapes_follow_points(self):
        s = Circle((0, 0), 1).sdf(_grid())
        assert s.distance.shape == (16, 16)
        assert s.emissive.shape == (16, 16)

    def test_single_pair_query(self):
        s = Circle((0, 0), 1, 0.5).sdf((3.0, 4.0))
        assert float(s.distance) == 4.0
        assert float(s.emissive) == 0.5

    def test_requery_is_bit_identical(self):
        shape = subtract(union(Circle((0, 0), 2, 1.0), Capsule((1, 1), (4, 2), 0.5, 0.4)),
                         Triangle((0, 0), (2, 0), (0, 2), 3.0))
        g = _grid()
        s1 = shape.sdf(g)
        s2 = shape.sdf(g)
        assert np.array_equal(s1.distance, s2.distance)
        assert np.array_equal(s1.emissive, s2.emissive)

    def test_translate_moves_centre(self):
        moved = Circle((0, 0), 1, 0.6).translate(5.0, 0.0)
        s = moved.sdf(_p(5.0, 0.0))
        npt.assert_allclose(s.distance, [-1.0], atol=1e-12)
        npt.assert_allclose(s.emissive, [0.6])

    def test_scale_changes_size(self):
        scaled = Circle((0, 0), 1).scale(2.0)
        npt.assert_allclose(scaled.sdf(_p(0.0, 0.0)).distance, [-2.0], atol=1e-12)

    def test_scale_rejects_non_positive(self):
        with pytest.raises(ShapeError):
            Circle((0, 0), 1).scale(0.0)

    def test_rotate_turns_rectangle(self):
        rotated = Rectangle((0, 0), 0.0, 2, 1).rotate(np.pi / 2)
        npt.assert_allclose(rotated.sdf(_p(0.0, 1.5)).distance, [-0.5], atol=1e-12)

    def test_round_grows_by_rad(self):
        rounded = Rectangle((0, 0), 0.0, 1, 1, 0.8).round(0.5)
        s = rounded.sdf(_p(2.0, 0.0))
        npt.assert_allclose(s.distance, [0.5], atol=1e-12)
        npt.assert_allclose(s.emissive, [0.8])

    def test_onion_makes_shell(self):
        shell = Circle((0, 0), 1).onion(0.1)
        npt.assert_allclose(shell.sdf(_p(0, 0)).distance, [0.9], atol=1e-12)
        npt.assert_allclose(shell.sdf(_p(1, 0)).distance, [-0.1], atol=1e-12)


# ===========================================================================
# Primitive shapes
# ===========================================================================

class TestCircle:
    def test_centre_is_minus_radius(self):
        npt.assert_allclose(Circle((256, 192), 64).sdf(_p(256, 192)).distance, [-64.0])

    def test_on_rim(self):
        npt.assert_allclose(Circle((256, 192), 64).sdf(_p(256, 256)).distance, [0.0], atol=1e-6)

    def test_distance_minus_radius_everywhere(self):
        g = _grid(11, 0.0, 500.0)
        expected = np.hypot(g[..., 0] - 256.0, g[..., 1] - 192.0) - 64.0
        npt.assert_allclose(Circle((256, 192), 64).sdf(g).distance, expected, rtol=1e-12)

    def test_emissive_constant(self):
        s = Circle((0, 0), 1, 0.25).sdf(_grid())
        assert (s.emissive == 0.25).all()

    def test_attributes(self):
        c = Circle((1, 2), 3, 0.5)
        npt.assert_array_equal(c.center, [1.0, 2.0])
        assert c.radius == 3.0
        assert c.emissive == 0.5


class TestPrimitiveValidation:
    @pytest.mark.parametrize("emissive", [-0.1, float("nan"), float("inf")])
    def test_bad_emissive(self, emissive):
        with pytest.raises(ShapeError):
            Circle((0, 0), 1, emissive)

    def test_shape_error_is_value_error(self):
        with pytest.raises(ValueError):
            Circle((0, 0), 1, -1.0)

    def test_bad_point(self):
        with pytest.raises(ShapeError):
            Circle((0, 0, 0), 1)


class TestPlane:
    def test_sign(self):
        plane = Plane((0, 5), (0, 1), 0.5)
        npt.assert_allclose(plane.sdf(np.array([[0, 8], [0, 2]])).distance, [3.0, -3.0])


class TestCapsule:
    def test_inside(self):
        assert Capsule((0, 0), (4, 0), 1).sdf(_p(2, 0)).distance[0] < 0

    def test_degenerate(self):
        npt.assert_allclose(Capsule((1, 1), (1, 1), 1).sdf(_p(4, 5)).distance, [4.0])


class TestRectangle:
    def test_inside_and_outside(self):
        r = Rectangle((10, 10), 0.0, 2, 1)
        npt.assert_allclose(r.sdf(np.array([[10, 10], [13, 10]])).distance, [-1.0, 1.0])


class TestTriangle:
    def test_inside_either_winding(self):
        t1 = Triangle((0, 0), (4, 0), (0, 4))
        t2 = Triangle((0, 0), (0, 4), (4, 0))
        npt.assert_allclose(t1.sdf(_p(1, 1)).distance, [-1.0])
        npt.assert_allclose(t2.sdf(_p(1, 1)).distance, [-1.0])

    def test_outside(self):
        assert Triangle((0, 0), (4, 0), (0, 4)).sdf(_p(5, 5)).distance[0] > 0


# ===========================================================================
# Boolean operations
# ===========================================================================

class TestUnion:
    def test_min_algebra(self):
        g = _grid()
        for a, b in _pairs():
            da, db = a.sdf(g).distance, b.sdf(g).distance
            npt.assert_array_equal(union(a, b).sdf(g).distance, np.minimum(da, db))

    def test_emission_follows_nearer_shape(self):
        u = Union(Circle((0, 0), 2, 1.0), Circle((3, 0), 2, 0.5))
        s = u.sdf(np.array([[0, 0], [3, 0]]))
        npt.assert_array_equal(s.emissive, [1.0, 0.5])

    def test_method_form(self):
        u = Circle((0, 0), 1).union(Circle((5, 0), 1))
        assert isinstance(u, Union)


class TestIntersect:
    def test_max_algebra(self):
        g = _grid()
        for a, b in _pairs():
            da, db = a.sdf(g).distance, b.sdf(g).distance
            npt.assert_array_equal(intersect(a, b).sdf(g).distance, np.maximum(da, db))

    def test_emission_follows_farther_shape(self):
        i = Intersect(Circle((0, 0), 2, 1.0), Circle((3, 0), 2, 0.5))
        s = i.sdf(np.array([[0, 0], [3, 0]]))
        npt.assert_array_equal(s.distance, [1.0, 1.0])
        npt.assert_array_equal(s.emissive, [0.5, 1.0])

    def test_emission_matches_distance_branch(self):
        g = _grid()
        for a, b in _pairs():
            sa, sb = a.sdf(g), b.sdf(g)
            s = intersect(a, b).sdf(g)
            from_a = sa.distance > sb.distance
            npt.assert_array_equal(s.emissive[from_a], sa.emissive[from_a])
            from_b = sb.distance > sa.distance
            npt.assert_array_equal(s.emissive[from_b], sb.emissive[from_b])


class TestSubtract:
    def test_max_neg_algebra(self):
        g = _grid()
        for a, b in _pairs():
            da, db = a.sdf(g).distance, b.sdf(g).distance
            npt.assert_array_equal(subtract(a, b).sdf(g).distance, np.maximum(da, -db))

    def test_inside_base_outside_cutter_keeps_base_emission(self):
        s = Subtract(Circle((0, 0), 3, 1.0), Circle((2, 0), 1, 0.25)).sdf(_p(-1, 0))
        npt.assert_allclose(s.distance, [-2.0])
        npt.assert_array_equal(s.emissive, [1.0])

    def test_cutter_never_emits(self):
        s = Subtract(Circle((0, 0), 3, 1.0), Circle((2, 0), 1, 0.25)).sdf(_grid())
        assert (s.emissive == 1.0).all()

    def test_carved_region_is_outside(self):
        s = Subtract(Circle((0, 0), 3), Circle((2, 0), 1)).sdf(_p(2, 0))
        npt.assert_allclose(s.distance, [1.0])


# ===========================================================================
# Tree ownership
# ===========================================================================

class TestOwnership:
    def test_children_recorded(self):
        a, b = Circle((0, 0), 1), Circle((1, 0), 1)
        u = union(a, b)
        assert u.children == (a, b)
        assert a.owned and b.owned
        assert not u.owned

    def test_child_cannot_be_adopted_twice(self):
        a, b, c = Circle((0, 0), 1), Circle((1, 0), 1), Circle((2, 0), 1)
        union(a, b)
        with pytest.raises(ShapeError):
            intersect(a, c)

    def test_same_child_twice(self):
        a = Circle((0, 0), 1)
        with pytest.raises(ShapeError):
            union(a, a)
        assert not a.owned

    def test_modifier_takes_ownership(self):
        a = Circle((0, 0), 1)
        a.translate(1.0, 0.0)
        with pytest.raises(ShapeError):
            subtract(a, Circle((0, 0), 0.5))

    def test_non_shape_child(self):
        with pytest.raises(ShapeError):
            Union(Circle((0, 0), 1), "circle")

    def test_owned_child_still_queryable(self):
        a = Circle((0, 0), 1, 0.5)
        union(a, Circle((4, 0), 1))
        npt.assert_allclose(a.sdf(_p(0, 0)).distance, [-1.0])

    def test_custom_shape_from_function(self):
        g = Shape2D(lambda p: Sample(p[..., 0], np.ones(p.shape[:-1])))
        npt.assert_array_equal(g.sdf(_p(3, 9)).distance, [3.0])
