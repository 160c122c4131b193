"""
Geo module - Web Mercator projection math and coordinate converters.

Scalar converters live in ``converters``; ``arrays`` holds their numpy
counterparts and ``crs`` the pyproj-backed EPSG:4326 <-> EPSG:3857 path.
"""

from .arrays import lng_lat_arrays, tile_lng_lat_arrays, xy_arrays
from .converters import bounds, convert_lng_lat, convert_xy, ul, xy_bounds
from .crs import (
    build_transformers,
    crs_web_mercator,
    crs_wgs84,
    proj_lng_lat,
    proj_xy,
)
from .projection import tile_to_lng_lat

__all__ = [
    'bounds',
    'build_transformers',
    'convert_lng_lat',
    'convert_xy',
    'crs_web_mercator',
    'crs_wgs84',
    'lng_lat_arrays',
    'proj_lng_lat',
    'proj_xy',
    'tile_lng_lat_arrays',
    'tile_to_lng_lat',
    'ul',
    'xy_arrays',
    'xy_bounds',
]
