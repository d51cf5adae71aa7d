"""Configuration utilities for byd-hass."""

from .constants import ENV_FILE, ENV_PREFIX
from .settings import RelaySettings, SensorSettings

__all__ = ["RelaySettings", "SensorSettings", "ENV_PREFIX", "ENV_FILE"]
