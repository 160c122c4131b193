"""Value types for tile addresses, points and bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass

from mercator_tiles.domain.validation import validate_tile_address
from mercator_tiles.shared.constants import DEFAULT_COORDINATE_FORMAT


@dataclass(frozen=True)
class Tile:
    """
    An XYZ Web Mercator tile.

    Construction validates the address; an out-of-range x or y raises
    ``InvalidTileError`` instead of being clamped.
    """

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        validate_tile_address(self.x, self.y, self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))


@dataclass(frozen=True)
class LngLat:
    """Geographic point in degrees (EPSG:4326)."""

    lng: float
    lat: float

    def __iter__(self):
        return iter((self.lng, self.lat))


@dataclass(frozen=True)
class XY:
    """Web Mercator point in meters (EPSG:3857)."""

    x: float
    y: float

    def __iter__(self):
        return iter((self.x, self.y))


@dataclass(frozen=True)
class LngLatBbox:
    """Geographic bounding box in degrees."""

    west: float
    south: float
    east: float
    north: float

    def __iter__(self):
        return iter((self.west, self.south, self.east, self.north))

    def as_strings(
        self, fmt: str = DEFAULT_COORDINATE_FORMAT
    ) -> tuple[str, str, str, str]:
        """Render (west, south, east, north) with a printf-style format."""
        return (fmt % self.west, fmt % self.south, fmt % self.east, fmt % self.north)


@dataclass(frozen=True)
class Bbox:
    """Web Mercator bounding box in meters."""

    left: float
    bottom: float
    right: float
    top: float

    def __iter__(self):
        return iter((self.left, self.bottom, self.right, self.top))

    def as_strings(
        self, fmt: str = DEFAULT_COORDINATE_FORMAT
    ) -> tuple[str, str, str, str]:
        """Render (left, bottom, right, top) with a printf-style format."""
        return (fmt % self.left, fmt % self.bottom, fmt % self.right, fmt % self.top)
