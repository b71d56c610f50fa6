"""Public package API for earzone, linear-time ear-clipping triangulation.

This facade provides a flat import surface on top of the implementation
package ``earzone.core`` and defers the matplotlib based visualization
module until first use to keep ``import earzone`` fast.

Example
-------
    from earzone import triangulate_polygon, random_star_polygon

    pts = random_star_polygon(200, seed=1)
    tris = triangulate_polygon(pts)      # (198, 3) int32
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("earzone")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_geom = _imp('earzone.core.geometry')
_const = _imp('earzone.core.constants')
_tri = _imp('earzone.core.triangulate')
_zones = _imp('earzone.core.zones')
_ring = _imp('earzone.core.ring')
_valid = _imp('earzone.core.validation')
_shapes = _imp('earzone.core.shapes')
_stats = _imp('earzone.core.stats')
_config = _imp('earzone.core.config')
_io = _imp('earzone.core.io')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)
        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m
        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)
        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# matplotlib import is deferred
visualization = _lazy_module('earzone.core.visualization')


def plot_triangulation(*args, **kwargs):
    return visualization.plot_triangulation(*args, **kwargs)


# Entry points
triangulate = _tri.triangulate
triangulate_polygon = _tri.triangulate_polygon
required_capacity = _tri.required_capacity

# Configuration / statistics
TriangulateConfig = _config.TriangulateConfig
TriangulationStats = _stats.TriangulationStats
format_stats_table = _stats.format_stats_table

# Validation
validate_polygon = _valid.validate_polygon
check_triangulation = _valid.check_triangulation
polygon_orientation = _valid.polygon_orientation
PolygonValidationError = _valid.PolygonValidationError

# Geometry
polygon_signed_area = _geom.polygon_signed_area
triangle_area = _geom.triangle_area
triangles_signed_areas = _geom.triangles_signed_areas
point_in_triangle = _geom.point_in_triangle

# Shapes
regular_polygon = _shapes.regular_polygon
random_star_polygon = _shapes.random_star_polygon
random_convex_polygon = _shapes.random_convex_polygon

# I/O
load_polygon = _io.load_polygon
save_polygon = _io.save_polygon
write_vtk = _io.write_vtk

# Namespace submodules for exploratory users
geometry = _geom
constants = _const
zones = _zones
ring = _ring
validation = _valid
shapes = _shapes
stats = _stats
config = _config
io = _io

__all__ = [
    '__version__',
    # entry points
    'triangulate', 'triangulate_polygon', 'required_capacity',
    'TriangulateConfig', 'TriangulationStats', 'format_stats_table',
    # validation
    'validate_polygon', 'check_triangulation', 'polygon_orientation', 'PolygonValidationError',
    # geometry
    'polygon_signed_area', 'triangle_area', 'triangles_signed_areas', 'point_in_triangle',
    # shapes / io / plotting
    'regular_polygon', 'random_star_polygon', 'random_convex_polygon',
    'load_polygon', 'save_polygon', 'write_vtk', 'plot_triangulation',
    # submodules / namespaces
    'geometry', 'constants', 'zones', 'ring', 'validation', 'shapes', 'stats', 'config', 'io',
    'visualization',
]
