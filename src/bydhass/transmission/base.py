"""Contract shared by every sink that sensor readings are sent to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class TransmissionError(RuntimeError):
    """Base exception for delivery failures."""


class TransmitterNotConnectedError(TransmissionError):
    """Raised when delivery is attempted while the sink is unavailable."""


class Transmitter(ABC):
    """A destination for sensor readings, such as an MQTT bus or ABRP.

    Implementations own their connection handling, retries and timeouts.
    """

    @abstractmethod
    def transmit(self, data: Any) -> None:
        """Deliver one sensor-reading payload, raising on failure."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Report readiness without performing I/O."""
