"""Implicit-function combinators used to paint a :class:`~sdf2mesh.field.DistanceField`.

An implicit function is any callable ``f(p) -> distances`` where *p* is a
``(..., 3)`` array of points and the result is a ``(...)`` array of
signed-distance-like values (``<= 0`` inside, ``> 0`` outside).  The
helpers below return :class:`Geometry3D` wrappers, which are themselves such
callables and can be nested freely.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np
import numpy.typing as npt

from . import sdf_lib as sdf

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]


# ===========================================================================
# Base class
# ===========================================================================

class Geometry3D:
    """Callable wrapper around a vectorised signed distance function.

    Implements:
    - Boolean operations: :meth:`union`
    - Transforms:         :meth:`translate`
    """

    def __init__(self, func: _SDFFunc) -> None:
        self._func = func

    def sdf(self, p: _Array) -> _Array:
        """Evaluate signed distance at *p* (shape ``(..., 3)``)."""
        return self._func(np.asarray(p, dtype=float))

    def __call__(self, p: _Array) -> _Array:
        return self.sdf(p)

    def union(self, *others: _SDFFunc) -> Geometry3D:
        """Return the union (min) of this shape and *others*."""
        return Union3D(self, *others)

    def translate(self, tx: float, ty: float, tz: float) -> Geometry3D:
        """Translate by ``(tx, ty, tz)``."""
        t = np.array([tx, ty, tz], dtype=float)
        return Geometry3D(lambda p: sdf.opTranslate(p, t, self.sdf))


# ===========================================================================
# Primitive shapes
# ===========================================================================

class Sphere3D(Geometry3D):
    """Sphere centred at origin with given *radius*."""

    def __init__(self, radius: float) -> None:
        super().__init__(lambda p: sdf.sdSphere(p, radius))


class Torus3D(Geometry3D):
    """Torus whose ring lies in the XZ plane.

    Parameters
    ----------
    major:
        Distance from the origin to the centre of the tube.
    minor:
        Radius of the tube cross-section.
    """

    def __init__(self, major: float, minor: float) -> None:
        t = np.array([major, minor], dtype=float)
        super().__init__(lambda p: sdf.sdTorus(p, t))


class Box3D(Geometry3D):
    """Axis-aligned box with *half_size* ``(hx, hy, hz)`` centred at origin."""

    def __init__(self, half_size: Sequence[float]) -> None:
        b = np.array(half_size, dtype=float)
        super().__init__(lambda p: sdf.sdBox(p, b))


class Union3D(Geometry3D):
    """Union of any number of implicit functions (minimum SDF)."""

    def __init__(self, *funcs: _SDFFunc) -> None:
        self.children = tuple(funcs)
        super().__init__(lambda p: sdf.opMerge(p, self.children))


# ===========================================================================
# Functional combinators
# ===========================================================================

def sphere(r: float) -> Geometry3D:
    """Sphere of radius *r* around the local origin: ``|p| - r``."""
    return Sphere3D(r)


def sphere_at(cx: float, cy: float, cz: float, r: float) -> Geometry3D:
    """Sphere of radius *r* centred at ``(cx, cy, cz)``."""
    return translate(cx, cy, cz, sphere(r))


def torus(major: float, minor: float) -> Geometry3D:
    """Torus in the XZ plane: ``|(|(x, z)| - major, y)| - minor``."""
    return Torus3D(major, minor)


def box(half_size: Sequence[float]) -> Geometry3D:
    """Axis-aligned box with half-extents *half_size*."""
    return Box3D(half_size)


def translate(tx: float, ty: float, tz: float, f: _SDFFunc) -> Geometry3D:
    """Re-centre *f* at ``(tx, ty, tz)``: evaluates ``f(p - t)``."""
    if not isinstance(f, Geometry3D):
        f = Geometry3D(f)
    return f.translate(tx, ty, tz)


def merge(*funcs: _SDFFunc) -> Geometry3D:
    """Union of *funcs*: ``min(f1(p), ..., fn(p))``.

    With no functions the result is ``+inf`` everywhere.
    """
    return Union3D(*funcs)
