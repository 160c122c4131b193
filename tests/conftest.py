"""Pytest configuration and fixtures for mercator_tiles tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from mercator_tiles.domain.models import Tile  # noqa: E402


@pytest.fixture
def dublin_tile():
    """Tile (486, 332, 10), covering Dublin."""
    return Tile(486, 332, 10)
