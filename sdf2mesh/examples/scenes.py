"""Demo scenes sized relative to the field they are painted into.

Usage::

    from sdf2mesh import DistanceField, extract_mesh
    from sdf2mesh.examples import three_spheres

    field = three_spheres(DistanceField(16))
    mesh = extract_mesh(field)
"""

from __future__ import annotations

from sdf2mesh.field import DistanceField
from sdf2mesh.geometry import Geometry3D, merge, sphere, torus, translate


def three_spheres(field: DistanceField) -> DistanceField:
    """Paint a large central sphere flanked by two smaller ones.

    Small spheres of radius ``width/6`` sit at a quarter and three quarters
    of the way along X and Y; the big one of radius ``width/4`` sits in the
    middle.  All three are centred in depth.
    """
    w, h, d = field.width, field.height, field.depth
    scene: Geometry3D = merge(
        translate(w / 4, h / 4, d / 2, sphere(w / 6)),
        translate(w / 2, h / 2, d / 2, sphere(w / 4)),
        translate(w / 4 * 3, h / 4 * 3, d / 2, sphere(w / 6)),
    )
    return field.draw_distance_function(scene)


def torus_scene(field: DistanceField, minor_ratio: float = 0.4) -> DistanceField:
    """Paint a torus in the XZ plane, centred in the grid.

    The major radius is a quarter of the smaller of width and depth, and the
    tube radius is *minor_ratio* times that.
    """
    major = min(field.width, field.depth) / 4
    ring = torus(major, major * minor_ratio)
    return field.draw_distance_function(
        translate(field.width / 2, field.height / 2, field.depth / 2, ring)
    )
