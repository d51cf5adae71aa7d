"""Environment-backed settings for the relay."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator  # type: ignore[import]
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore[import]

from .constants import ENV_FILE, ENV_PREFIX

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SensorSettings(BaseSettings):
    """Sensor override read from ``BYD_HASS_SENSOR_IDS`` or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=ENV_FILE,
        extra="ignore",
    )

    sensor_ids: str = Field(
        default="",
        description="Comma-separated sensor ids, each optionally suffixed with ':0' or ':1'",
    )


class RelaySettings(SensorSettings):
    """All ``BYD_HASS_*`` settings used by the entry point."""

    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
