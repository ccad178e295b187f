"""iotdiff: Differential Telemetry Codec

A Python library for bandwidth-minimal transmission of periodic IoT device
snapshots. Each message carries one "unchanged" bit per optional field and
only the payloads that changed since the previous message of the stream.

Key Features:
- Pydantic-based snapshot model
- Sub-byte bit packing with 5-bit restricted-alphabet strings
- Stateful sessions: the codec instance is the stream history
- Pure Python implementation

Quick Start:
    >>> from uuid import uuid4
    >>> from iotdiff import DeviceSnapshot, PhysicalValue, SnapshotCodec
    >>>
    >>> snapshot = DeviceSnapshot(
    ...     name="SENSORALPHA",
    ...     identifier=uuid4(),
    ...     status_message="ALL SYST EMS",
    ...     self_check_passed=True,
    ...     service_mode_enabled=False,
    ...     uptime_seconds=3600,
    ...     pressure=PhysicalValue(value=1.013, unit="bar"),
    ...     temperature=PhysicalValue(value=21.5, unit="°C"),
    ...     distance=PhysicalValue(value=0.42, unit="m"),
    ... )
    >>> sender, receiver = SnapshotCodec(), SnapshotCodec()
    >>> received = receiver.decode(sender.encode(snapshot))
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import SessionState, SnapshotCodec, decode_snapshot, encode_snapshot
from .config import CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    IotdiffError,
    OutOfData,
    SchemaError,
    UnsupportedCharacter,
)
from .models import (
    DISTANCE_UNIT,
    PRESSURE_UNIT,
    TEMPERATURE_UNIT,
    DeviceSnapshot,
    PhysicalValue,
)
from .utils import field_sizes, max_encoded_size, min_encoded_size

__all__ = [
    # Core API
    "SnapshotCodec",
    "SessionState",
    "encode_snapshot",
    "decode_snapshot",
    "CodecConfig",
    # Models
    "DeviceSnapshot",
    "PhysicalValue",
    "PRESSURE_UNIT",
    "TEMPERATURE_UNIT",
    "DISTANCE_UNIT",
    # Exceptions
    "IotdiffError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "OutOfData",
    "UnsupportedCharacter",
    # Sizing
    "field_sizes",
    "max_encoded_size",
    "min_encoded_size",
    # Version
    "__version__",
]
