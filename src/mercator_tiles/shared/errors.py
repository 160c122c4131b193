"""Exception hierarchy for tile and coordinate conversions."""

from __future__ import annotations


class TileMathError(Exception):
    """Base class for all errors raised by mercator_tiles."""


class InvalidTileError(TileMathError):
    """Tile address outside the valid range for its zoom level."""

    def __init__(self, x: int, y: int, z: int):
        self.x = x
        self.y = y
        self.z = z
        super().__init__(
            'require tile x and y to be within the range (0, 2 ** zoom): '
            f'got x={x}, y={y}, z={z}'
        )


class SettingsError(TileMathError):
    """Settings file is missing or does not validate."""
