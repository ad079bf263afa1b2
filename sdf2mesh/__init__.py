"""
sdf2mesh: signed distance fields to triangle meshes
===================================================

Samples implicit 3-D signed distance functions onto a dense voxel grid and
extracts the zero level set as a triangle mesh with surface nets.

Implemented features
--------------------
- Implicit functions: :func:`sphere`, :func:`torus`, :func:`box`,
  :func:`translate`, :func:`merge` (and their :class:`Geometry3D` classes)
- Voxel grid: :class:`DistanceField` with union-by-minimum painting
- Edge lookup: :func:`edge_table`
- Mesh extraction: :func:`extract_mesh` returning a :class:`Mesh`

Quick start
-----------

::

    from sdf2mesh import DistanceField, extract_mesh, merge, sphere, translate

    field = DistanceField(16)
    field.draw_distance_function(
        merge(
            translate(5, 8, 8, sphere(3)),
            translate(11, 8, 8, sphere(3)),
        )
    )
    mesh = extract_mesh(field)
    mesh.vertices   # float32, (x, y, z, nx, ny, nz) per vertex
    mesh.indices    # uint32, counter-clockwise triangles
"""

from .errors import ConfigurationError
from .geometry import (
    Geometry3D,
    Sphere3D,
    Torus3D,
    Box3D,
    Union3D,
    sphere,
    sphere_at,
    torus,
    box,
    translate,
    merge,
)
from .field import DistanceField, draw, voxel_centers
from .edge_table import CUBE_CORNERS, CUBE_EDGES, edge_table
from .mesh import Mesh
from .surface_nets import extract_mesh

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ConfigurationError",

    # Implicit functions
    "Geometry3D",
    "Sphere3D",
    "Torus3D",
    "Box3D",
    "Union3D",
    "sphere",
    "sphere_at",
    "torus",
    "box",
    "translate",
    "merge",

    # Voxel grid
    "DistanceField",
    "draw",
    "voxel_centers",

    # Extraction
    "CUBE_CORNERS",
    "CUBE_EDGES",
    "edge_table",
    "Mesh",
    "extract_mesh",
]
