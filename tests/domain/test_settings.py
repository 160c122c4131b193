"""Tests for Settings model and persistence."""

import logging

import pytest
import tomlkit
from pydantic import ValidationError

from mercator_tiles.domain.models import Bbox, LngLatBbox
from mercator_tiles.domain.settings import (
    Settings,
    format_bbox,
    load_settings,
    save_settings,
)
from mercator_tiles.shared.constants import LOG_FORMAT
from mercator_tiles.shared.errors import SettingsError


class TestSettingsModel:
    """Tests for Settings validation."""

    def test_defaults(self):
        """Defaults match the shared constants."""
        settings = Settings()
        assert settings.logging.level == 'INFO'
        assert settings.logging.format == LOG_FORMAT
        assert settings.logging.file is None
        assert settings.output.coordinate_format == '%f'

    def test_log_level_is_uppercased(self):
        """Level names are case-insensitive."""
        assert Settings(logging={'level': 'warning'}).logging.level == 'WARNING'

    def test_unknown_log_level_rejected(self):
        """Unknown level names fail validation."""
        with pytest.raises(ValidationError):
            Settings(logging={'level': 'LOUD'})

    @pytest.mark.parametrize('fmt', ['no fields', '%(message', '%(message)q'])
    def test_bad_log_format_rejected(self, fmt):
        """Log formats that logging.Formatter rejects fail validation."""
        with pytest.raises(ValidationError):
            Settings(logging={'format': fmt})

    def test_custom_log_format_accepted(self):
        """A well-formed %-style format is kept as is."""
        settings = Settings(logging={'format': '%(levelname)s %(message)s'})
        assert settings.logging.format == '%(levelname)s %(message)s'

    def test_bad_coordinate_format_rejected(self):
        """Format without a float placeholder fails validation."""
        with pytest.raises(ValidationError):
            Settings(output={'coordinate_format': 'no placeholder'})

    def test_extra_fields_ignored(self):
        """Unknown sections and keys are ignored."""
        settings = Settings.model_validate(
            {'logging': {'level': 'DEBUG', 'legacy': 1}, 'misc': {'a': 1}}
        )
        assert settings.logging.level == 'DEBUG'
        assert not hasattr(settings, 'misc')


class TestFormatBbox:
    """Tests for format_bbox function."""

    def test_default_settings(self):
        """Without settings the %f format is used."""
        bbox = Bbox(left=0.5, bottom=-1.0, right=2.25, top=3.0)
        assert format_bbox(bbox) == ('0.500000', '-1.000000', '2.250000', '3.000000')

    def test_configured_format(self):
        """Configured format applies to geographic boxes too."""
        bbox = LngLatBbox(west=-9.140625, south=53.0, east=-8.7890625, north=53.5)
        settings = Settings(output={'coordinate_format': '%.1f'})
        assert format_bbox(bbox, settings) == ('-9.1', '53.0', '-8.8', '53.5')


class TestLoadSaveSettings:
    """Tests for load_settings / save_settings."""

    def test_save_then_load(self, tmp_path):
        """Saved settings load back unchanged."""
        saved = Settings(
            logging={'level': 'DEBUG', 'file': 'out/tiles.log'},
            output={'coordinate_format': '%.3f'},
        )
        path = save_settings(tmp_path / 'settings.toml', saved)
        assert load_settings(path) == saved

    def test_saved_file_has_tables(self, tmp_path):
        """File uses [logging] and [output] tables."""
        path = save_settings(tmp_path / 'settings.toml', Settings())
        data = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
        assert set(data) == {'logging', 'output'}
        assert data['logging']['level'] == 'INFO'

    def test_unset_log_file_omitted(self, tmp_path):
        """TOML has no null, so an unset log file is not written."""
        path = save_settings(tmp_path / 'settings.toml', Settings())
        data = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
        assert 'file' not in data['logging']

    def test_partial_file_uses_defaults(self, tmp_path):
        """Missing tables and keys fall back to defaults."""
        path = tmp_path / 'partial.toml'
        path.write_text('[logging]\nlevel = "error"\n', encoding='utf-8')
        settings = load_settings(path)
        assert settings.logging.level == 'ERROR'
        assert settings.output.coordinate_format == '%f'

    def test_missing_file_raises(self, tmp_path):
        """Missing file raises SettingsError."""
        with pytest.raises(SettingsError, match='not found'):
            load_settings(tmp_path / 'absent.toml')

    def test_directory_raises(self, tmp_path):
        """A directory path is not a settings file."""
        with pytest.raises(SettingsError, match='not found'):
            load_settings(tmp_path)

    def test_non_utf8_file_raises(self, tmp_path):
        """Undecodable bytes are wrapped in SettingsError."""
        path = tmp_path / 'latin.toml'
        path.write_bytes(b'[logging]\nlevel = "\xff"\n')
        with pytest.raises(SettingsError) as exc_info:
            load_settings(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_content_raises(self, tmp_path):
        """Validation failures are wrapped in SettingsError."""
        path = tmp_path / 'bad.toml'
        path.write_text('[logging]\nlevel = "LOUD"\n', encoding='utf-8')
        with pytest.raises(SettingsError) as exc_info:
            load_settings(path)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_malformed_toml_raises(self, tmp_path):
        """TOML syntax errors are wrapped in SettingsError."""
        path = tmp_path / 'broken.toml'
        path.write_text('[logging\nlevel = "INFO"\n', encoding='utf-8')
        with pytest.raises(SettingsError, match='Invalid settings'):
            load_settings(path)

    def test_load_logs_info(self, tmp_path, caplog):
        """Loading is logged at INFO."""
        path = save_settings(tmp_path / 'settings.toml', Settings())
        with caplog.at_level(logging.INFO, logger='mercator_tiles'):
            load_settings(path)
        assert 'Settings loaded' in caplog.text
