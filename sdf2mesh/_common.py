"""Shared numpy helpers for the implicit-function layer.

This module provides:

* **Type alias**: :data:`_F`
* **Vector constructor**: :func:`vec2`
* **Math helpers**: :func:`length`
* **Boolean operator**: :func:`opUnion`

Not meant to be imported directly by end users; import from
``sdf2mesh.geometry`` instead.
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
    "vec2",
    "length",
    "opUnion",
]


# ===========================================================================
# Vector constructor
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


# ===========================================================================
# Boolean operators
# ===========================================================================

def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two SDFs: ``min(d1, d2)``."""
    return np.minimum(d1, d2)
