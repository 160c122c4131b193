"""Tile grid traversal."""

from mercator_tiles.tiles.neighbors import get_neighbors

__all__ = ['get_neighbors']
