"""Conversions between tiles, geographic and Web Mercator coordinates."""

from __future__ import annotations

import logging

from mercator_tiles.domain.models import XY, Bbox, LngLat, LngLatBbox, Tile
from mercator_tiles.geo.projection import (
    inverse_mercator_lat,
    inverse_mercator_lng,
    mercator_x,
    mercator_y,
    tile_to_lng_lat,
)
from mercator_tiles.shared.constants import CE, POLE_LAT_DEG

logger = logging.getLogger(__name__)


def ul(tile: Tile) -> LngLat:
    """Upper-left (northwest) corner of a tile."""
    return tile_to_lng_lat(tile.x, tile.y, tile.z)


def bounds(tile: Tile) -> LngLatBbox:
    """
    Geographic bounding box of a tile.

    The southeast corner comes from the raw (x + 1, y + 1) address, which
    lies outside the grid for the last column/row and is therefore never
    turned into a Tile.
    """
    nw = tile_to_lng_lat(tile.x, tile.y, tile.z)
    se = tile_to_lng_lat(tile.x + 1, tile.y + 1, tile.z)
    return LngLatBbox(west=nw.lng, south=se.lat, east=se.lng, north=nw.lat)


def xy_bounds(tile: Tile) -> Bbox:
    """Web Mercator bounding box of a tile, by linear subdivision of the world."""
    tile_size = CE / 2.0**tile.z
    left = tile.x * tile_size - CE / 2.0
    right = left + tile_size
    top = CE / 2.0 - tile.y * tile_size
    bottom = top - tile_size
    return Bbox(left=left, bottom=bottom, right=right, top=top)


def convert_xy(lng_lat: LngLat) -> XY:
    """
    Geographic point to Web Mercator meters.

    Latitudes at or beyond the poles map to an infinite northing of the
    matching sign; the easting is always computed.
    """
    x = mercator_x(lng_lat.lng)
    if lng_lat.lat <= -POLE_LAT_DEG:
        logger.debug('Latitude %s at or below south pole, y=-inf', lng_lat.lat)
        y = float('-inf')
    elif lng_lat.lat >= POLE_LAT_DEG:
        logger.debug('Latitude %s at or above north pole, y=inf', lng_lat.lat)
        y = float('inf')
    else:
        y = mercator_y(lng_lat.lat)
    return XY(x=x, y=y)


def convert_lng_lat(xy: XY) -> LngLat:
    """Web Mercator meters to geographic point."""
    return LngLat(lng=inverse_mercator_lng(xy.x), lat=inverse_mercator_lat(xy.y))
