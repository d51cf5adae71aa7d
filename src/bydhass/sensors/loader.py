"""Build the sensor selection from the built-in table or an override string."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..configs import SensorSettings
from .constants import (
    DEFAULT_MONITORED_SENSORS,
    ENTRY_SEPARATOR,
    FLAG_SEPARATOR,
    SENSOR_IDS_ENV,
    UNPUBLISHED_FLAG,
)
from .models import MonitoredSensor, SensorSelection

_logger = logging.getLogger(__name__)

_SENSOR_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MIN_SENSOR_ID = -(2**63)
_MAX_SENSOR_ID = 2**63 - 1


def default_sensor_selection() -> SensorSelection:
    """Return the built-in sensor table."""

    return SensorSelection(
        sensors=tuple(
            MonitoredSensor(id=sensor_id, publish=publish)
            for sensor_id, publish in DEFAULT_MONITORED_SENSORS
        )
    )


def parse_sensor_ids(raw: str) -> List[MonitoredSensor]:
    """Parse ``"33:0,34:1,56"`` style text into monitored sensors.

    Blank tokens are ignored and tokens without a valid integer id are
    dropped individually. A flag of exactly ``"0"`` marks the sensor as
    poll-only; any other flag, or none, publishes it.
    """

    sensors: List[MonitoredSensor] = []
    for token in raw.split(ENTRY_SEPARATOR):
        token = token.strip()
        if not token:
            continue

        id_text, separator, flag = token.partition(FLAG_SEPARATOR)
        if not _is_valid_sensor_id(id_text):
            _logger.warning("Skipping invalid sensor entry %r in %s", token, SENSOR_IDS_ENV)
            continue

        publish = not (separator and flag == UNPUBLISHED_FLAG)
        sensors.append(MonitoredSensor(id=int(id_text), publish=publish))
    return sensors


def _is_valid_sensor_id(text: str) -> bool:
    if not _SENSOR_ID_PATTERN.fullmatch(text):
        return False
    return _MIN_SENSOR_ID <= int(text) <= _MAX_SENSOR_ID


def load_monitored_sensors(raw: Optional[str]) -> SensorSelection:
    """Parse ``raw``, falling back to the built-in table when nothing usable remains."""

    if not raw:
        return default_sensor_selection()

    sensors = parse_sensor_ids(raw)
    if not sensors:
        _logger.info("%s contained no valid sensor ids; using defaults", SENSOR_IDS_ENV)
        return default_sensor_selection()

    return SensorSelection(sensors=tuple(sensors))


def load_sensor_selection(settings: Optional[SensorSettings] = None) -> SensorSelection:
    """Build the selection from ``settings``, reading the environment when omitted.

    Only the sensor override is read from the environment.
    """

    if settings is None:
        settings = SensorSettings()
    return load_monitored_sensors(settings.sensor_ids)
