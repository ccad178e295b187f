"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Callable
from uuid import UUID

import pytest

from iotdiff import DeviceSnapshot, PhysicalValue

DEVICE_ID = UUID("12345678-1234-5678-1234-567812345678")


@pytest.fixture
def device_id() -> UUID:
    """Identifier of the sample device."""
    return DEVICE_ID


@pytest.fixture
def make_snapshot() -> Callable[..., DeviceSnapshot]:
    """Factory for snapshots of the sample device with field overrides.

    Measurements may be overridden with plain floats.
    """

    def factory(**overrides: Any) -> DeviceSnapshot:
        fields: dict[str, Any] = {
            "name": "PUMPSTATIONA",
            "identifier": DEVICE_ID,
            "status_message": "ALL GOOD NOW",
            "self_check_passed": True,
            "service_mode_enabled": False,
            "uptime_seconds": 1000,
            "pressure": 1.5,
            "temperature": 21.25,
            "distance": 3.75,
        }
        fields.update(overrides)
        fields["pressure"] = PhysicalValue(value=fields["pressure"], unit="bar")
        fields["temperature"] = PhysicalValue(value=fields["temperature"], unit="°C")
        fields["distance"] = PhysicalValue(value=fields["distance"], unit="m")
        return DeviceSnapshot(**fields)

    return factory


@pytest.fixture
def snapshot(make_snapshot: Callable[..., DeviceSnapshot]) -> DeviceSnapshot:
    """Sample snapshot with every field set."""
    return make_snapshot()
