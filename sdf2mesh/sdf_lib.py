"""3-D SDF math primitives for the sdf2mesh package.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 3)``; scalar SDF results have shape ``(...,)``.

Formulas are adapted from Inigo Quilez's distance function reference:
https://iquilezles.org/articles/distfunctions/
"""

import numpy as np

from ._common import *  # noqa: F401, F403 re-export shared helpers


def sdSphere(p: _F, s: float) -> _F:
    """Sphere of radius *s* centred at the origin."""
    return length(p) - s


def sdTorus(p: _F, t: _F) -> _F:
    """Torus in the XZ plane; *t* = ``(R, r)`` (major, minor radii)."""
    q = vec2(length(p[..., [0, 2]]) - t[0], p[..., 1])
    return length(q) - t[1]


def sdBox(p: _F, b: _F) -> _F:
    """Axis-aligned box with half-extents *b* ``(bx, by, bz)``."""
    q = np.abs(p) - b
    return length(np.maximum(q, 0.0)) + np.minimum(np.max(q, axis=-1), 0.0)


def opTranslate(p: _F, t: _F, primitive) -> _F:
    """Evaluate *primitive* in a frame whose origin sits at *t*."""
    return primitive(p - t)


def opMerge(p: _F, primitives) -> _F:
    """Union of any number of primitives; ``+inf`` when there are none."""
    d = np.full(p.shape[:-1], np.inf)
    for f in primitives:
        d = opUnion(d, f(p))
    return d
