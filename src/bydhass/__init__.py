"""Sensor allowlist and transmitter contract for the byd-hass telemetry relay."""

__version__ = "0.1.0"
