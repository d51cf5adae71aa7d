"""
Shared pytest fixtures for byd-hass tests.
"""
import os

import pytest

from bydhass.sensors import MonitoredSensor, SensorSelection


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from BYD_HASS_* variables and any local .env file."""
    for key in list(os.environ):
        if key.startswith("BYD_HASS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mixed_selection():
    """Selection with one poll-only sensor between two published ones."""
    return SensorSelection(
        sensors=(
            MonitoredSensor(id=12, publish=False),
            MonitoredSensor(id=34, publish=True),
            MonitoredSensor(id=56),
        )
    )
