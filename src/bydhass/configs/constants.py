"""Constants for configuration handling."""

ENV_PREFIX = "BYD_HASS_"
ENV_FILE = ".env"
