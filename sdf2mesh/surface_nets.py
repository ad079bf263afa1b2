"""Surface-nets mesh extraction from a :class:`~sdf2mesh.field.DistanceField`.

Algorithm overview
------------------
The extractor walks the *dual grid*: one cell per cube of 8 neighbouring
samples, so ``(width-1) x (height-1) x (depth-1)`` cells indexed
``c = x + y*gw + z*gw*gh`` like the samples themselves.

Vertices
    Each cube is classified by the signs of its corners (bit ``j`` set when
    corner ``j`` is outside).  Cubes with no crossing edge are skipped.  The
    others get one vertex at the mean of the linearly interpolated zero
    crossings along their crossing edges, shifted by the cell coordinate and
    half a voxel (samples sit at voxel centres).  The normal is the
    finite-difference gradient over the 8 corners, normalised.

Faces
    Every crossing edge that leaves corner 0 of a cube is shared by four
    cells; their four vertices form a quad, split in two triangles whose
    winding depends on whether corner 0 is outside.  Quads touching a cell
    that is off the grid or has no vertex are dropped.

Both phases are vectorised with numpy over all cells.  The result is in the
same order as a single forward sweep over the cells.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import numpy as np

from .edge_table import CUBE_CORNERS, CUBE_EDGES, X_EDGE, Y_EDGE, Z_EDGE, edge_table
from .field import DistanceField
from .mesh import Mesh

logger = logging.getLogger(__name__)

#: Normal stored for vertices whose gradient is zero or not finite.
DEGENERATE_NORMAL: Tuple[float, float, float] = (0.0, 0.0, 0.0)

_CORNER_BITS = (1 << np.arange(8, dtype=np.int64))
_EDGE_BITS = (1 << np.arange(12, dtype=np.int64))

# For each axis, corners with that bit clear and their partner with it set.
_GRADIENT_PAIRS = [
    ([j for j in range(8) if not j >> axis & 1], [j | 1 << axis for j in range(8) if not j >> axis & 1])
    for axis in range(3)
]

# Triangles of a quad (v0, v1, v2, v3) given corner 0 outside / inside.
_WINDING_OUTSIDE = np.array([[0, 3, 1], [0, 2, 3]])
_WINDING_INSIDE = np.array([[0, 1, 3], [0, 3, 2]])


# ---------------------------------------------------------------------------
# Phase 1: classification and vertex placement
# ---------------------------------------------------------------------------

def _cube_corners(field: DistanceField) -> np.ndarray:
    """``(cells, 8)`` array of corner samples, rows in linear cell order."""
    vol = field.samples.reshape(field.shape)
    gd, gh, gw = field.depth - 1, field.height - 1, field.width - 1
    corners = [vol[w:w + gd, v:v + gh, u:u + gw] for u, v, w in CUBE_CORNERS]
    return np.stack(corners, axis=-1).reshape(-1, 8)


def _corner_masks(values: np.ndarray) -> np.ndarray:
    return ((values > 0) * _CORNER_BITS).sum(axis=1)


def _edge_crossings(values: np.ndarray, edges: np.ndarray) -> np.ndarray:
    """Mean local crossing point of each active cube, shape ``(n, 3)``."""
    crossing = (edges[:, None] & _EDGE_BITS) != 0                     # (n, 12)
    d0 = values[:, CUBE_EDGES[:, 0]].astype(np.float64)
    d1 = values[:, CUBE_EDGES[:, 1]].astype(np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        t = (0.0 - d0) / (d1 - d0)
    # An unpainted (+inf) endpoint puts the crossing on the finite endpoint.
    t = np.where(np.isinf(d1), 0.0, t)
    t = np.where(np.isinf(d0), 1.0, t)
    t = np.where(crossing, t, 0.0)

    c0 = CUBE_CORNERS[CUBE_EDGES[:, 0]]                                # (12, 3)
    c1 = CUBE_CORNERS[CUBE_EDGES[:, 1]]
    points = c0 + t[..., None] * (c1 - c0)                             # (n, 12, 3)
    total = (points * crossing[..., None]).sum(axis=1)
    return total / crossing.sum(axis=1)[:, None]


def _gradient_normals(values: np.ndarray, fallback: Sequence[float]) -> Tuple[np.ndarray, int]:
    """Unit finite-difference gradients over the cube corners."""
    v = values.astype(np.float64)
    with np.errstate(invalid="ignore"):
        grad = np.stack(
            [(v[:, hi] - v[:, lo]).mean(axis=1) for lo, hi in _GRADIENT_PAIRS], axis=-1
        )
        norm = np.linalg.norm(grad, axis=1)
    ok = np.isfinite(norm) & (norm > 0)
    normals = np.empty_like(grad)
    normals[ok] = grad[ok] / norm[ok, None]
    normals[~ok] = np.asarray(fallback, dtype=np.float64)
    return normals, int((~ok).sum())


# ---------------------------------------------------------------------------
# Phase 2: faces
# ---------------------------------------------------------------------------

def _quads(
    cells: np.ndarray,
    edges: np.ndarray,
    cell_vertex: np.ndarray,
    dims: Tuple[int, int, int],
) -> Tuple[np.ndarray, np.ndarray]:
    """Quads around the x, y and z edges at corner 0 of each active cell.

    Returns ``(quads, owners)``: ``(m, 4)`` vertex indices in rotational order
    and the row of *cells* each quad belongs to.  Quads with a neighbour off
    the grid or without a vertex are left out.
    """
    gw, gh, _ = dims
    slab = gw * gh
    x = cells % gw
    y = (cells // gw) % gh
    z = cells // slab

    # Edge axis -> (edge bit, first off-axis step, second off-axis step),
    # off-axes in cyclic order after the edge axis.
    steps = [
        (X_EDGE, (gw, y > 0), (slab, z > 0)),
        (Y_EDGE, (slab, z > 0), (1, x > 0)),
        (Z_EDGE, (1, x > 0), (gw, y > 0)),
    ]

    quads = np.empty((cells.size, 3, 4), dtype=np.int64)
    keep = np.empty((cells.size, 3), dtype=bool)
    wanted = 0
    for k, (bit, (da, has_a), (db, has_b)) in enumerate(steps):
        crosses = ((edges >> bit) & 1).astype(bool)
        wanted += int(crosses.sum())
        inside = crosses & has_a & has_b
        neighbours = np.stack([cells, cells - da, cells - db, cells - da - db], axis=-1)
        neighbours = np.where(inside[:, None], neighbours, 0)
        verts = cell_vertex[neighbours]
        quads[:, k] = verts
        keep[:, k] = inside & (verts >= 0).all(axis=1)

    if wanted > keep.sum():
        logger.debug("Dropped %d boundary faces", wanted - int(keep.sum()))

    owners = np.broadcast_to(np.arange(cells.size)[:, None], keep.shape)
    return quads[keep], owners[keep]


def _triangulate(quads: np.ndarray, corner0_outside: np.ndarray) -> np.ndarray:
    winding = np.where(corner0_outside[:, None, None], _WINDING_OUTSIDE, _WINDING_INSIDE)
    tris = np.take_along_axis(quads[:, None, :], winding, axis=2)        # (m, 2, 3)
    return tris.reshape(-1)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_mesh(
    field: DistanceField,
    *,
    degenerate_normal: Sequence[float] = DEGENERATE_NORMAL,
) -> Mesh:
    """Extract the zero level set of *field* as a triangle mesh.

    Parameters
    ----------
    field:
        The sampled distance field; it is only read.
    degenerate_normal:
        Normal stored when the gradient at a cube vanishes (or is not finite).

    Returns
    -------
    Mesh
        Interleaved position/normal vertices and counter-clockwise triangle
        indices.  Empty when the surface does not cross the grid.
    """
    dims = (field.width - 1, field.height - 1, field.depth - 1)
    if min(dims) <= 0:
        logger.debug("%r has no dual cells", field)
        return Mesh.empty()

    values = _cube_corners(field)
    masks = _corner_masks(values)
    edges_all = edge_table()[masks].astype(np.int64)

    cells = np.flatnonzero(edges_all)
    if cells.size == 0:
        logger.debug("Surface does not cross %r", field)
        return Mesh.empty()

    values = values[cells]
    edges = edges_all[cells]
    gw, gh, _ = dims
    base = np.stack([cells % gw, (cells // gw) % gh, cells // (gw * gh)], axis=-1)

    positions = base + 0.5 + _edge_crossings(values, edges)
    normals, degenerate = _gradient_normals(values, degenerate_normal)
    if degenerate:
        logger.debug("%d vertices with degenerate gradient", degenerate)

    cell_vertex = np.full(edges_all.size, -1, dtype=np.int64)
    cell_vertex[cells] = np.arange(cells.size)

    quads, owners = _quads(cells, edges, cell_vertex, dims)
    corner0_outside = (masks[cells][owners] & 1).astype(bool)
    indices = _triangulate(quads, corner0_outside)

    mesh = Mesh(np.hstack([positions, normals]).reshape(-1), indices)
    logger.debug(
        "Extracted %d vertices, %d triangles from %d of %d cells",
        mesh.vertex_count, mesh.triangle_count, cells.size, edges_all.size,
    )
    return mesh
