"""PROJ-backed EPSG:4326 <-> EPSG:3857 transforms for cross-checking."""

from __future__ import annotations

import logging
from functools import lru_cache

from pyproj import CRS, Transformer

from mercator_tiles.domain.models import XY, LngLat
from mercator_tiles.shared.constants import WEB_MERCATOR_CODE, WGS84_CODE

logger = logging.getLogger(__name__)

# Географическая WGS84
crs_wgs84 = CRS.from_epsg(WGS84_CODE)
# Сферический Web Mercator
crs_web_mercator = CRS.from_epsg(WEB_MERCATOR_CODE)


@lru_cache(maxsize=1)
def build_transformers() -> tuple[Transformer, Transformer]:
    """
    Build the WGS84 <-> Web Mercator transformer pair.

    Returns:
        (to_mercator, to_geographic), both with lng/lat axis order.

    """
    logger.debug(
        'Building EPSG:%s <-> EPSG:%s transformers', WGS84_CODE, WEB_MERCATOR_CODE
    )
    to_mercator = Transformer.from_crs(crs_wgs84, crs_web_mercator, always_xy=True)
    to_geographic = Transformer.from_crs(crs_web_mercator, crs_wgs84, always_xy=True)
    return to_mercator, to_geographic


def proj_xy(lng_lat: LngLat) -> XY:
    """Geographic point to Web Mercator meters via PROJ."""
    to_mercator, _ = build_transformers()
    x, y = to_mercator.transform(lng_lat.lng, lng_lat.lat)
    return XY(x=x, y=y)


def proj_lng_lat(xy: XY) -> LngLat:
    """Web Mercator meters to geographic point via PROJ."""
    _, to_geographic = build_transformers()
    lng, lat = to_geographic.transform(xy.x, xy.y)
    return LngLat(lng=lng, lat=lat)
