"""Dense voxel grid of signed distance samples.

Samples live in a flat ``float32`` buffer indexed
``i = x + y*width + z*width*height`` (x varies fastest).  A value ``<= 0``
means inside the surface, ``> 0`` outside.  A fresh field holds ``+inf``
everywhere and implicit functions are painted into it by pointwise minimum,
so several shapes can share one field.
"""

from __future__ import annotations

import logging
import numbers
from typing import Callable, Optional, Tuple

import numpy as np
import numpy.typing as npt

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return int(value)


def voxel_centers(width: int, height: int, depth: int) -> _Array:
    """Return the ``(depth, height, width, 3)`` array of voxel centre points.

    Entry ``[z, y, x]`` is ``(x + 0.5, y + 0.5, z + 0.5)``.
    """
    Z, Y, X = np.meshgrid(
        np.arange(depth, dtype=float),
        np.arange(height, dtype=float),
        np.arange(width, dtype=float),
        indexing="ij",
    )
    return np.stack([X, Y, Z], axis=-1) + 0.5


def draw(width: int, height: int, depth: int, data: np.ndarray, scene: _SDFFunc) -> None:
    """Paint *scene* into the flat sample buffer *data* in place.

    Each sample becomes ``min(data[i], scene(centre_i))``.  The whole grid is
    evaluated in a single vectorised call.
    """
    shape = (depth, height, width)
    if data.ndim != 1 or data.size != width * height * depth:
        raise ConfigurationError(
            f"sample buffer of shape {data.shape} does not match grid "
            f"{width}x{height}x{depth}"
        )

    values = np.asarray(scene(voxel_centers(width, height, depth)))
    if values.ndim == 0:
        values = np.broadcast_to(values, shape)
    elif values.shape != shape:
        raise ConfigurationError(
            f"implicit function returned shape {values.shape}, expected {shape}"
        )

    view = data.reshape(shape)
    np.minimum(view, values.astype(data.dtype, copy=False), out=view)


class DistanceField:
    """Dense 3-D grid of signed distance samples.

    Parameters
    ----------
    width:
        Number of samples along X.
    height, depth:
        Number of samples along Y and Z; default to *width*.
    """

    def __init__(
        self,
        width: int,
        height: Optional[int] = None,
        depth: Optional[int] = None,
    ) -> None:
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", width if height is None else height)
        self.depth = _check_dimension("depth", width if depth is None else depth)
        self.samples = np.full(self.size, np.inf, dtype=np.float32)

    @classmethod
    def from_samples(
        cls,
        samples: npt.ArrayLike,
        width: int,
        height: Optional[int] = None,
        depth: Optional[int] = None,
    ) -> "DistanceField":
        """Build a field around an existing sample buffer.

        *samples* is copied to a flat ``float32`` array; a ``(depth, height,
        width)`` array is accepted as well.
        """
        field = cls(width, height, depth)
        data = np.asarray(samples, dtype=np.float32)
        if data.size != field.size or data.ndim not in (1, 3) or (
            data.ndim == 3 and data.shape != field.shape
        ):
            raise ConfigurationError(
                f"{data.size} samples of shape {data.shape} do not match grid "
                f"{field.width}x{field.height}x{field.depth}"
            )
        field.samples = data.reshape(-1).copy()
        return field

    # ------------------------------------------------------------------
    # Geometry of the grid
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Total number of samples."""
        return self.width * self.height * self.depth

    @property
    def shape(self) -> Tuple[int, int, int]:
        """``(depth, height, width)``, the z-first array shape of the grid."""
        return (self.depth, self.height, self.width)

    def index(self, x: int, y: int, z: int) -> int:
        """Linear sample index of ``(x, y, z)``."""
        if not (0 <= x < self.width and 0 <= y < self.height and 0 <= z < self.depth):
            raise IndexError(f"({x}, {y}, {z}) is outside the grid")
        return x + y * self.width + z * self.width * self.height

    def coordinates(self, i: int) -> Tuple[int, int, int]:
        """Inverse of :meth:`index`."""
        if not 0 <= i < self.size:
            raise IndexError(f"sample index {i} is outside the grid")
        return (
            i % self.width,
            (i // self.width) % self.height,
            i // (self.width * self.height),
        )

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def draw_distance_function(self, f: _SDFFunc) -> "DistanceField":
        """Union *f* into the field: ``samples = min(samples, f(centres))``."""
        draw(self.width, self.height, self.depth, self.samples, f)
        logger.debug(
            "Painted %s into %dx%dx%d field", getattr(f, "__name__", type(f).__name__),
            self.width, self.height, self.depth,
        )
        return self

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def volume(self) -> _Array:
        """Read-only ``(depth, height, width)`` view of the samples."""
        view = self.samples.reshape(self.shape)
        view.flags.writeable = False
        return view

    def slice_z(self, z: int) -> _Array:
        """Read-only ``(height, width)`` cross-section at depth *z*."""
        if not 0 <= z < self.depth:
            raise IndexError(f"slice {z} is outside depth {self.depth}")
        return self.volume[z]

    def __repr__(self) -> str:
        return f"DistanceField(width={self.width}, height={self.height}, depth={self.depth})"
