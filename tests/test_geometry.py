"""Tests for sdf2mesh implicit-function combinators."""

import numpy as np
import numpy.testing as npt
import pytest

from sdf2mesh import (
    Geometry3D,
    Sphere3D, Torus3D, Box3D, Union3D,
    sphere, sphere_at, torus, box, translate, merge,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _p(*xyz) -> np.ndarray:
    return np.array([list(xyz)], dtype=float)


def _grid(n: int = 6) -> np.ndarray:
    lin = np.linspace(-3.0, 3.0, n)
    Z, Y, X = np.meshgrid(lin, lin, lin, indexing="ij")
    return np.stack([X, Y, Z], axis=-1)


# ===========================================================================
# Primitives
# ===========================================================================

class TestSphere:
    def test_centre_is_minus_radius(self):
        npt.assert_allclose(sphere(1.5)(_p(0, 0, 0)), [-1.5])

    def test_outside_point(self):
        npt.assert_allclose(sphere(1.0)(_p(3, 0, 4)), [4.0])

    def test_on_surface(self):
        npt.assert_allclose(sphere(2.0)(_p(0, 2, 0)), [0.0], atol=1e-12)

    def test_class_and_function_agree(self):
        p = _grid()
        npt.assert_allclose(Sphere3D(1.2).sdf(p), sphere(1.2)(p))

    def test_preserves_batch_shape(self):
        p = np.zeros((4, 5, 3))
        assert sphere(1.0)(p).shape == (4, 5)


class TestTorus:
    def test_tube_centre(self):
        npt.assert_allclose(torus(2.0, 0.5)(_p(2, 0, 0)), [-0.5])

    def test_ring_lies_in_xz_plane(self):
        t = torus(2.0, 0.5)
        npt.assert_allclose(t(_p(0, 0, 2)), [-0.5])
        npt.assert_allclose(t(_p(0, 2, 0)), [np.hypot(2.0, 2.0) - 0.5])

    def test_hole_is_outside(self):
        npt.assert_allclose(torus(2.0, 0.5)(_p(0, 0, 0)), [1.5])

    def test_class_and_function_agree(self):
        p = _grid()
        npt.assert_allclose(Torus3D(2.0, 0.3).sdf(p), torus(2.0, 0.3)(p))


class TestBox:
    def test_centre(self):
        npt.assert_allclose(box((1.0, 2.0, 3.0))(_p(0, 0, 0)), [-1.0])

    def test_face_distance(self):
        npt.assert_allclose(Box3D((1.0, 1.0, 1.0)).sdf(_p(3, 0, 0)), [2.0])


# ===========================================================================
# Combinators
# ===========================================================================

class TestTranslate:
    def test_moves_centre(self):
        f = translate(1.0, 2.0, 3.0, sphere(1.0))
        npt.assert_allclose(f(_p(1, 2, 3)), [-1.0])

    def test_evaluates_shifted_point(self):
        p = _grid()
        f = translate(0.5, -1.0, 2.0, torus(1.5, 0.4))
        npt.assert_allclose(f(p), torus(1.5, 0.4)(p - np.array([0.5, -1.0, 2.0])))

    def test_accepts_plain_callable(self):
        f = translate(2.0, 0.0, 0.0, lambda p: p[..., 0])
        npt.assert_allclose(f(_p(5, 1, 1)), [3.0])
        assert isinstance(f, Geometry3D)

    def test_method_form(self):
        p = _grid()
        npt.assert_allclose(sphere(1.0).translate(1, 1, 1)(p), translate(1, 1, 1, sphere(1.0))(p))

    def test_sphere_at(self):
        p = _grid()
        npt.assert_allclose(sphere_at(1, -2, 0.5, 1.3)(p), translate(1, -2, 0.5, sphere(1.3))(p))


class TestMerge:
    def test_is_pointwise_minimum(self):
        p = _grid()
        a = translate(-1.0, 0.0, 0.0, sphere(1.0))
        b = translate(1.5, 0.0, 0.0, torus(1.0, 0.25))
        npt.assert_allclose(merge(a, b)(p), np.minimum(a(p), b(p)))

    def test_many_functions(self):
        p = _grid()
        fs = [translate(float(i), 0.0, 0.0, sphere(0.5)) for i in range(-2, 3)]
        expected = np.min([f(p) for f in fs], axis=0)
        npt.assert_allclose(merge(*fs)(p), expected)

    def test_empty_merge_is_infinite(self):
        assert np.isinf(merge()(_p(0, 0, 0))).all()

    def test_single_function_is_identity(self):
        p = _grid()
        npt.assert_allclose(merge(sphere(1.0))(p), sphere(1.0)(p))

    def test_union_method(self):
        p = _grid()
        a, b = sphere(1.0), translate(2, 0, 0, sphere(1.0))
        npt.assert_allclose(a.union(b)(p), Union3D(a, b)(p))

    def test_nested_merges(self):
        p = _grid()
        a, b, c = sphere(0.5), translate(1, 0, 0, sphere(0.5)), translate(0, 1, 0, sphere(0.5))
        npt.assert_allclose(merge(merge(a, b), c)(p), merge(a, b, c)(p))

    @pytest.mark.parametrize("point", [(0, 0, 0), (1, 1, 1), (-2, 0.5, 3)])
    def test_never_above_any_member(self, point):
        a, b = sphere(1.0), torus(2.0, 0.5)
        d = merge(a, b)(_p(*point))
        assert d[0] <= a(_p(*point))[0]
        assert d[0] <= b(_p(*point))[0]
