"""Application entry point for byd-hass."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from pydantic import ValidationError  # type: ignore[import]

from .common import configure_logging
from .configs import RelaySettings, SensorSettings
from .sensors import ABRP_SENSOR_IDS, SensorSelection, load_sensor_selection


def main() -> None:
    """Console entry point: validate settings and report the active sensor selection."""

    try:
        settings = RelaySettings()
    except ValidationError as exc:
        configure_logging()
        logging.getLogger(__name__).error("Invalid configuration: %s", exc)
        sys.exit(1)

    configure_logging(settings.log_level_number)
    build_sensor_selection(settings)


def build_sensor_selection(settings: Optional[SensorSettings] = None) -> SensorSelection:
    """Load the selection once and log what will be polled and published."""

    logger = logging.getLogger(__name__)
    selection = load_sensor_selection(settings)

    logger.info("Polling %d sensors: %s", len(selection), _format_ids(selection.poll_sensor_ids()))
    logger.info("Publishing: %s", _format_ids(selection.published_sensor_ids()))

    missing = selection.missing_sensor_ids(ABRP_SENSOR_IDS)
    if missing:
        logger.warning("ABRP sensors not polled: %s", _format_ids(missing))

    return selection


def _format_ids(ids: list[int]) -> str:
    return ", ".join(str(sensor_id) for sensor_id in ids) or "[none]"


if __name__ == "__main__":
    main()
