from __future__ import annotations

from mercator_tiles.shared.constants import MAX_ZOOM
from mercator_tiles.shared.errors import InvalidTileError


def minmax(z: int) -> tuple[int, int]:
    """Return the inclusive (min, max) tile index at zoom ``z``."""
    return 0, 2**z - 1


def _is_int(v: object) -> bool:
    # bool is an int subclass but never a tile index
    return isinstance(v, int) and not isinstance(v, bool)


def is_valid_tile_address(x: int, y: int, z: int) -> bool:
    """
    Check whether (x, y) addresses an existing tile at zoom ``z``.

    Only plain ints are accepted, and zoom is limited to [0, MAX_ZOOM]
    because 2.0 ** z overflows a double above it.
    """
    if not (_is_int(x) and _is_int(y) and _is_int(z)):
        return False
    if z < 0 or z > MAX_ZOOM:
        return False
    lo, hi = minmax(z)
    return lo <= x <= hi and lo <= y <= hi


def validate_tile_address(x: int, y: int, z: int) -> None:
    """
    Validate a tile address.

    Raises:
        InvalidTileError: If any component is not an int, x or y is outside
            [0, 2**z - 1], or z is outside [0, MAX_ZOOM].

    """
    if not is_valid_tile_address(x, y, z):
        raise InvalidTileError(x, y, z)
