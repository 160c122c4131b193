"""Shared constants, errors and logging helpers."""
from mercator_tiles.shared.errors import InvalidTileError, SettingsError, TileMathError
from mercator_tiles.shared.logging_setup import setup_logging

__all__ = [
    'InvalidTileError',
    'SettingsError',
    'TileMathError',
    'setup_logging',
]
