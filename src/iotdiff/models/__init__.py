"""Pydantic record models for iotdiff."""

from __future__ import annotations

from .base import BaseRecord
from .snapshot import (
    DISTANCE_UNIT,
    PRESSURE_UNIT,
    TEMPERATURE_UNIT,
    DeviceSnapshot,
    PhysicalValue,
)

__all__ = [
    "BaseRecord",
    "DeviceSnapshot",
    "PhysicalValue",
    "PRESSURE_UNIT",
    "TEMPERATURE_UNIT",
    "DISTANCE_UNIT",
]
