"""Settings model and its TOML persistence."""

from __future__ import annotations

import logging
from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field, ValidationError, field_validator
from tomlkit.exceptions import ParseError

from mercator_tiles.domain.models import Bbox, LngLatBbox
from mercator_tiles.shared.constants import (
    DEFAULT_COORDINATE_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
)
from mercator_tiles.shared.errors import SettingsError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


class LoggingSettings(BaseModel):
    """Секция [logging]: уровень, формат и файл журнала."""

    model_config = {'extra': 'ignore'}

    # Уровень журнала (имя уровня модуля logging)
    level: str = DEFAULT_LOG_LEVEL
    # Формат записи журнала (%-стиль logging)
    format: str = LOG_FORMAT
    # Необязательный файл журнала (UTF-8)
    file: str | None = None

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            msg = f'Unknown log level {v!r}, expected one of {", ".join(_LOG_LEVELS)}'
            raise ValueError(msg)
        return level

    @field_validator('format')
    @classmethod
    def validate_format(cls, v: str) -> str:
        # Formatter(validate=True) raises ValueError for malformed strings
        logging.Formatter(v, validate=True)
        return v


class OutputSettings(BaseModel):
    """Секция [output]: представление координат."""

    model_config = {'extra': 'ignore'}

    # Формат вывода координат рамок (printf-стиль)
    coordinate_format: str = DEFAULT_COORDINATE_FORMAT

    @field_validator('coordinate_format')
    @classmethod
    def validate_coordinate_format(cls, v: str) -> str:
        try:
            v % 0.0
        except (TypeError, ValueError) as exc:
            msg = f'coordinate_format must format a single float: {v!r}'
            raise ValueError(msg) from exc
        return v


class Settings(BaseModel):
    """Настройки журналирования и вывода координат, по секциям TOML."""

    model_config = {
        'extra': 'ignore',  # игнорировать неизвестные секции из файла
    }

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


def format_bbox(
    bbox: Bbox | LngLatBbox, settings: Settings | None = None
) -> tuple[str, str, str, str]:
    """Render bbox edges using the configured coordinate format."""
    fmt = settings.output.coordinate_format if settings else DEFAULT_COORDINATE_FORMAT
    return bbox.as_strings(fmt)


def load_settings(path: str | Path) -> Settings:
    """
    Load and validate a settings TOML file with [logging] and [output] tables.

    Raises:
        SettingsError: If the path is not a regular file, cannot be read or
            decoded as UTF-8, is not valid TOML or fails validation.

    """
    path = Path(path)
    if not path.is_file():
        msg = f'Settings file not found: {path}'
        raise SettingsError(msg)
    try:
        data = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
        settings = Settings.model_validate(data)
    except (OSError, UnicodeDecodeError, ParseError, ValidationError) as exc:
        msg = f'Invalid settings in {path}: {exc}'
        raise SettingsError(msg) from exc
    logger.info(
        'Settings loaded from %s: log_level=%s', path, settings.logging.level
    )
    return settings


def save_settings(path: str | Path, settings: Settings) -> Path:
    """Save settings as TOML tables; unset optional values are omitted."""
    path = Path(path)
    text = tomlkit.dumps(settings.model_dump(exclude_none=True))
    path.write_text(text, encoding='utf-8')
    logger.info('Settings saved to %s', path)
    return path
