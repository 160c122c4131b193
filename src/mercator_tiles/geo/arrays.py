"""Vectorised counterparts of the scalar converters, built on numpy."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from mercator_tiles.shared.constants import (
    PI,
    POLE_LAT_DEG,
    R2D,
    RE,
    WORLD_LNG_HALF_SPAN_DEG,
    WORLD_LNG_SPAN_DEG,
)


def xy_arrays(lng: ArrayLike, lat: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """
    Forward Web Mercator for arrays of longitudes and latitudes.

    Latitudes at or beyond ±90 give ∓inf/±inf northings without emitting
    floating point warnings.
    """
    lng_arr = np.asarray(lng, dtype=np.float64)
    lat_arr = np.asarray(lat, dtype=np.float64)

    x = RE * np.radians(lng_arr)

    south = lat_arr <= -POLE_LAT_DEG
    north = lat_arr >= POLE_LAT_DEG
    # Полюса подменяем нулём, чтобы tan не вычислялся в особой точке
    safe_lat = np.where(south | north, 0.0, lat_arr)
    y = RE * np.log(np.tan((PI * 0.25) + (0.5 * np.radians(safe_lat))))
    y = np.where(south, -np.inf, np.where(north, np.inf, y))
    return x, y


def lng_lat_arrays(x: ArrayLike, y: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """Inverse Web Mercator for arrays of eastings and northings."""
    x_arr = np.asarray(x, dtype=np.float64)
    y_arr = np.asarray(y, dtype=np.float64)
    lng = x_arr * R2D / RE
    with np.errstate(over='ignore'):
        lat = ((PI * 0.5) - 2.0 * np.arctan(np.exp(-y_arr / RE))) * R2D
    return lng, lat


def tile_lng_lat_arrays(
    xs: ArrayLike, ys: ArrayLike, z: int
) -> tuple[np.ndarray, np.ndarray]:
    """Northwest corners for arrays of tile columns and rows at zoom ``z``."""
    z2 = 2.0**z
    xs_arr = np.asarray(xs, dtype=np.float64)
    ys_arr = np.asarray(ys, dtype=np.float64)
    lng = xs_arr / z2 * WORLD_LNG_SPAN_DEG - WORLD_LNG_HALF_SPAN_DEG
    lat = np.degrees(np.arctan(np.sinh(PI * (1.0 - 2.0 * ys_arr / z2))))
    return lng, lat
