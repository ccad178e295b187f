"""Telemetry snapshot model.

A DeviceSnapshot is the unit the differential codec transmits. Field values
are validated for type and range here; alphabet and width checks belong to
the codec, which raises the wire-level errors for them.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import Field

from .base import BaseRecord

PRESSURE_UNIT = "bar"
TEMPERATURE_UNIT = "°C"
DISTANCE_UNIT = "m"

UINT64_MAX = (1 << 64) - 1


class PhysicalValue(BaseRecord):
    """A measured magnitude paired with its unit label.

    Only ``value`` travels over the wire; ``unit`` is reattached on decode.

    Example:
        >>> PhysicalValue(value=1.013, unit="bar")
        PhysicalValue(value=1.013, unit='bar')
    """

    value: float
    unit: str


class DeviceSnapshot(BaseRecord):
    """One periodic telemetry record from a device.

    Attributes:
        name: Device name, letters only, at most 12 characters
        identifier: 128-bit device identifier
        status_message: Ten letters, optionally grouped by spaces ("ABC DEFG HIJ")
        self_check_passed: Result of the last self check
        service_mode_enabled: Whether the device is in service mode
        uptime_seconds: Monotonic uptime counter (64-bit unsigned)
        pressure: Pressure reading
        temperature: Temperature reading
        distance: Distance reading
    """

    name: str = Field(max_length=12)
    identifier: UUID
    status_message: str
    self_check_passed: bool
    service_mode_enabled: bool
    uptime_seconds: int = Field(ge=0, le=UINT64_MAX)
    pressure: PhysicalValue
    temperature: PhysicalValue
    distance: PhysicalValue
