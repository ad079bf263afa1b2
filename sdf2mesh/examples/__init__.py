"""Ready-made scenes for a :class:`~sdf2mesh.field.DistanceField`.

Implemented scenes
------------------
:func:`three_spheres`
    Three merged spheres along the XY diagonal of the grid.

:func:`torus_scene`
    A single torus centred in the grid.
"""

from .scenes import three_spheres, torus_scene

__all__ = ["three_spheres", "torus_scene"]
