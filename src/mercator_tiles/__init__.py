"""
Tile, geographic and Web Mercator coordinate conversions.

Example:
    >>> from mercator_tiles import Tile, bounds, ul
    >>> ul(Tile(486, 332, 10))
    LngLat(lng=-9.140625, lat=53.33087298301705)
    >>> bounds(Tile(486, 332, 10)).east
    -8.7890625

"""

from mercator_tiles.domain import (
    XY,
    Bbox,
    LngLat,
    LngLatBbox,
    Settings,
    Tile,
    format_bbox,
    is_valid_tile_address,
    load_settings,
    minmax,
    save_settings,
)
from mercator_tiles.geo import (
    bounds,
    convert_lng_lat,
    convert_xy,
    tile_to_lng_lat,
    ul,
    xy_bounds,
)
from mercator_tiles.shared import (
    InvalidTileError,
    SettingsError,
    TileMathError,
    setup_logging,
)
from mercator_tiles.tiles import get_neighbors

__version__ = '0.1.0'
__all__ = [
    'XY',
    'Bbox',
    'InvalidTileError',
    'LngLat',
    'LngLatBbox',
    'Settings',
    'SettingsError',
    'Tile',
    'TileMathError',
    'bounds',
    'convert_lng_lat',
    'convert_xy',
    'format_bbox',
    'get_neighbors',
    'is_valid_tile_address',
    'load_settings',
    'minmax',
    'save_settings',
    'setup_logging',
    'tile_to_lng_lat',
    'ul',
    'xy_bounds',
]
