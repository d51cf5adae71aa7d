"""
Unit tests for environment-backed settings.
"""
import logging

import pytest
from pydantic import ValidationError

from bydhass.configs import RelaySettings


class TestRelaySettings:
    """Test RelaySettings"""

    def test_defaults(self):
        settings = RelaySettings(_env_file=None)
        assert settings.sensor_ids == ""
        assert settings.log_level == "INFO"
        assert settings.log_level_number == logging.INFO

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("BYD_HASS_SENSOR_IDS", "33:0,34")
        monkeypatch.setenv("BYD_HASS_LOG_LEVEL", "debug")
        settings = RelaySettings(_env_file=None)
        assert settings.sensor_ids == "33:0,34"
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG

    def test_reads_env_file(self, tmp_path):
        """Values may come from a .env file"""
        env_file = tmp_path / ".env"
        env_file.write_text("BYD_HASS_SENSOR_IDS=12:0,56\nUNRELATED=1\n")
        settings = RelaySettings(_env_file=env_file)
        assert settings.sensor_ids == "12:0,56"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            RelaySettings(log_level="LOUD", _env_file=None)
