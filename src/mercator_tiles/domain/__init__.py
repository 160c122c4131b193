"""Domain layer - value types, tile address validation and settings."""
from mercator_tiles.domain.models import XY, Bbox, LngLat, LngLatBbox, Tile
from mercator_tiles.domain.settings import (
    LoggingSettings,
    OutputSettings,
    Settings,
    format_bbox,
    load_settings,
    save_settings,
)
from mercator_tiles.domain.validation import (
    is_valid_tile_address,
    minmax,
    validate_tile_address,
)

__all__ = [
    'XY',
    'Bbox',
    'LngLat',
    'LngLatBbox',
    'LoggingSettings',
    'OutputSettings',
    'Settings',
    'Tile',
    'format_bbox',
    'is_valid_tile_address',
    'load_settings',
    'minmax',
    'save_settings',
    'validate_tile_address',
]
