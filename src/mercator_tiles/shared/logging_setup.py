"""Logging configuration for applications embedding mercator_tiles."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from mercator_tiles.shared.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT

if TYPE_CHECKING:
    from mercator_tiles.domain.settings import Settings


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Configure root logging: stdout plus an optional UTF-8 log file.

    The library itself never installs handlers; call this from the
    application entry point. Repeated calls replace the previous handlers.

    Args:
        settings: Source of level, format and log file. Defaults are used
            when omitted.

    Returns:
        The package logger.

    """
    level_name = settings.logging.level if settings else DEFAULT_LOG_LEVEL
    fmt = settings.logging.format if settings else LOG_FORMAT

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings and settings.logging.file:
        log_file = Path(settings.logging.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file), encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level_name),
        format=fmt,
        handlers=handlers,
        force=True,
    )
    return logging.getLogger('mercator_tiles')
