"""Sensor selection for byd-hass."""

from .constants import ABRP_SENSOR_IDS, DEFAULT_MONITORED_SENSORS, SENSOR_IDS_ENV
from .loader import (
    default_sensor_selection,
    load_monitored_sensors,
    load_sensor_selection,
    parse_sensor_ids,
)
from .models import MonitoredSensor, SensorSelection

__all__ = [
    "MonitoredSensor",
    "SensorSelection",
    "default_sensor_selection",
    "load_monitored_sensors",
    "load_sensor_selection",
    "parse_sensor_ids",
    "ABRP_SENSOR_IDS",
    "DEFAULT_MONITORED_SENSORS",
    "SENSOR_IDS_ENV",
]
