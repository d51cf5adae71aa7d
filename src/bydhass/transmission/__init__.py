"""Transmitter contract for byd-hass sinks."""

from .base import TransmissionError, Transmitter, TransmitterNotConnectedError

__all__ = ["Transmitter", "TransmissionError", "TransmitterNotConnectedError"]
