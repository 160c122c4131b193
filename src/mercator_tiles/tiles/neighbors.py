from __future__ import annotations

import logging

from mercator_tiles.domain.models import Tile
from mercator_tiles.domain.validation import minmax

logger = logging.getLogger(__name__)

_OFFSETS = (-1, 0, 1)


def get_neighbors(tile: Tile) -> list[Tile]:
    """
    Tiles sharing an edge or a corner with ``tile`` at the same zoom.

    Order is fixed: column offset in the outer loop, row offset in the inner
    one. Candidates outside the grid are skipped, so edge and corner tiles
    get fewer than eight neighbours.
    """
    lo, hi = minmax(tile.z)
    neighbors: list[Tile] = []
    for dx in _OFFSETS:
        for dy in _OFFSETS:
            if dx == 0 and dy == 0:
                continue
            x, y = tile.x + dx, tile.y + dy
            if not (lo <= x <= hi and lo <= y <= hi):
                logger.debug(
                    'Skipping out-of-range neighbour (%s, %s, %s)', x, y, tile.z
                )
                continue
            neighbors.append(Tile(x, y, tile.z))
    return neighbors
