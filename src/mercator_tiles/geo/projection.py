"""
Closed-form Web Mercator formulas.

Operation order follows the textbook formulas literally; the results are
compared bit-for-bit against reference values, so keep it that way.
"""

from __future__ import annotations

import math

from mercator_tiles.domain.models import LngLat
from mercator_tiles.shared.constants import (
    PI,
    R2D,
    RE,
    WORLD_LNG_HALF_SPAN_DEG,
    WORLD_LNG_SPAN_DEG,
)


def tile_lng(x: float, z: int) -> float:
    """Longitude of the west edge of tile column ``x`` at zoom ``z``."""
    z2 = 2.0**z
    return x / z2 * WORLD_LNG_SPAN_DEG - WORLD_LNG_HALF_SPAN_DEG


def tile_lat(y: float, z: int) -> float:
    """Latitude of the north edge of tile row ``y`` at zoom ``z``."""
    z2 = 2.0**z
    lat_rad = math.atan(math.sinh(PI * (1.0 - 2.0 * y / z2)))
    return math.degrees(lat_rad)


def tile_to_lng_lat(x: int, y: int, z: int) -> LngLat:
    """
    Northwest corner of the tile grid cell (x, y, z).

    Accepts raw indices without validation, so ``x + 1`` / ``y + 1`` can be
    passed to get the far edge of the last column or row.
    """
    return LngLat(lng=tile_lng(x, z), lat=tile_lat(y, z))


def mercator_x(lng: float) -> float:
    """Forward Web Mercator easting in meters."""
    return RE * math.radians(lng)


def mercator_y(lat: float) -> float:
    """Forward Web Mercator northing in meters; lat must be within (-90, 90)."""
    return RE * math.log(math.tan((PI * 0.25) + (0.5 * math.radians(lat))))


def inverse_mercator_lng(x: float) -> float:
    """Longitude in degrees for a Web Mercator easting."""
    return x * R2D / RE


def inverse_mercator_lat(y: float) -> float:
    """Latitude in degrees for a Web Mercator northing."""
    return ((PI * 0.5) - 2.0 * math.atan(math.exp(-y / RE))) * R2D
