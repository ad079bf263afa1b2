"""Triangle mesh produced by :func:`sdf2mesh.surface_nets.extract_mesh`."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

#: Floats per vertex record: position ``(x, y, z)`` then normal ``(nx, ny, nz)``.
VERTEX_STRIDE = 6


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Mesh:
    """Interleaved vertex buffer plus triangle index buffer.

    Attributes
    ----------
    vertices:
        Flat ``float32`` array, :data:`VERTEX_STRIDE` floats per vertex.
    indices:
        Flat ``uint32`` array; each consecutive triple is a counter-clockwise
        (front-facing) triangle.
    """

    vertices: np.ndarray
    indices: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "vertices", _frozen(np.ascontiguousarray(self.vertices, dtype=np.float32).reshape(-1))
        )
        object.__setattr__(
            self, "indices", _frozen(np.ascontiguousarray(self.indices, dtype=np.uint32).reshape(-1))
        )
        if self.vertices.size % VERTEX_STRIDE:
            raise ValueError(f"vertex buffer length {self.vertices.size} is not a multiple of {VERTEX_STRIDE}")
        if self.indices.size % 3:
            raise ValueError(f"index buffer length {self.indices.size} is not a multiple of 3")

    @classmethod
    def empty(cls) -> "Mesh":
        return cls(np.zeros(0, dtype=np.float32), np.zeros(0, dtype=np.uint32))

    @property
    def vertex_count(self) -> int:
        return self.vertices.size // VERTEX_STRIDE

    @property
    def triangle_count(self) -> int:
        return self.indices.size // 3

    @property
    def is_empty(self) -> bool:
        return self.vertex_count == 0

    @property
    def positions(self) -> np.ndarray:
        """``(N, 3)`` vertex positions."""
        return self.vertices.reshape(-1, VERTEX_STRIDE)[:, :3]

    @property
    def normals(self) -> np.ndarray:
        """``(N, 3)`` vertex normals."""
        return self.vertices.reshape(-1, VERTEX_STRIDE)[:, 3:]

    @property
    def triangles(self) -> np.ndarray:
        """``(M, 3)`` vertex indices per triangle."""
        return self.indices.reshape(-1, 3)

    def signed_volume(self) -> float:
        """Enclosed volume; positive when the triangles wind outward."""
        if self.triangle_count == 0:
            return 0.0
        tris = self.positions.astype(np.float64)[self.triangles]
        return float(np.einsum("ij,ij->i", tris[:, 0], np.cross(tris[:, 1], tris[:, 2])).sum() / 6.0)
