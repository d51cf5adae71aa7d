"""Data models describing which sensors are polled and published."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field  # type: ignore[import]

_T = TypeVar("_T")


class MonitoredSensor(BaseModel):
    """A sensor polled from the head unit, optionally exposed to sinks."""

    id: int = Field(..., description="Identifier in the sensor catalog")
    publish: bool = Field(
        default=True,
        description="Whether the value may leave the process",
    )

    model_config = ConfigDict(frozen=True)


class SensorSelection(BaseModel):
    """Immutable snapshot of the monitored sensors.

    Built once at start-up and handed to the poller and every sink. The
    projections below allocate a new list on each call.
    """

    sensors: Tuple[MonitoredSensor, ...] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.sensors)

    def poll_sensor_ids(self) -> List[int]:
        """Return every sensor id to request from the head unit, in order."""

        return [sensor.id for sensor in self.sensors]

    def published_sensor_ids(self) -> List[int]:
        """Return the ids whose values may be published, in order."""

        return [sensor.id for sensor in self.sensors if sensor.publish]

    def is_published(self, sensor_id: int) -> bool:
        """Return whether values of ``sensor_id`` may be published."""

        return any(sensor.publish and sensor.id == sensor_id for sensor in self.sensors)

    def filter_published(self, values: Mapping[int, _T]) -> Dict[int, _T]:
        """Drop every value whose sensor id is not published."""

        published = set(self.published_sensor_ids())
        return {sensor_id: value for sensor_id, value in values.items() if sensor_id in published}

    def missing_sensor_ids(self, required: Iterable[int]) -> List[int]:
        """Return the ids from ``required`` that are not polled."""

        polled = set(self.poll_sensor_ids())
        return [sensor_id for sensor_id in required if sensor_id not in polled]
