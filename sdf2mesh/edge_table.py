"""Corner-sign to crossing-edge lookup table for a unit cube.

Corner ``j`` (0..7) sits at local coordinate ``(j & 1, (j >> 1) & 1,
(j >> 2) & 1)``.  An 8-bit *corner mask* records which corners are outside
the surface; :func:`edge_table` maps it to a 12-bit *edge mask* whose bit
``k`` is set when the two endpoints of :data:`CUBE_EDGES` ``[k]`` lie on
opposite sides.
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np

#: Local ``(x, y, z)`` offset of each cube corner, shape ``(8, 3)``.
CUBE_CORNERS: np.ndarray = np.array(
    [[j & 1, (j >> 1) & 1, (j >> 2) & 1] for j in range(8)], dtype=np.int64
)
CUBE_CORNERS.flags.writeable = False

#: Corner index pairs of the 12 cube edges, shape ``(12, 2)``.
CUBE_EDGES: np.ndarray = np.array(
    [
        [0, 1], [0, 2], [1, 3], [2, 3],
        [0, 4], [1, 5], [2, 6], [3, 7],
        [4, 5], [4, 6], [5, 7], [6, 7],
    ],
    dtype=np.int64,
)
CUBE_EDGES.flags.writeable = False

#: Edges leaving corner 0 along +x, +y and +z.
X_EDGE, Y_EDGE, Z_EDGE = 0, 1, 4


@lru_cache(maxsize=None)
def edge_table() -> np.ndarray:
    """Return the read-only ``(256,)`` ``uint16`` table of crossing-edge masks.

    Built on first use and shared by every extraction afterwards.
    """
    patterns = np.arange(256, dtype=np.int64)[:, None]
    a = (patterns >> CUBE_EDGES[:, 0]) & 1
    b = (patterns >> CUBE_EDGES[:, 1]) & 1
    crossing = (a ^ b).astype(np.int64)
    table = (crossing << np.arange(12, dtype=np.int64)).sum(axis=1).astype(np.uint16)
    table.flags.writeable = False
    return table
