"""Differential snapshot decoder.

This module provides decode_snapshot(), which rebuilds a DeviceSnapshot from
one message and the values remembered in a SessionState. Messages must be
decoded in the order they were encoded.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import CodecConfig
from ..exceptions import DecodeError
from ..models.snapshot import DeviceSnapshot, PhysicalValue
from .bitpack import BitReader
from .schema import (
    STATUS_LENGTH,
    Emission,
    flagged_fields,
    read_value,
    snapshot_layout,
)
from .state import SessionState

logger = logging.getLogger(__name__)

UINT64_MASK = (1 << 64) - 1


def format_status(status_message: str) -> str:
    """Group an unspaced status message as 3/4/3 characters.

    Messages that already contain a space are returned unchanged.

    Example:
        >>> format_status("ABCDEFGHIJ")
        'ABC DEFG HIJ'
    """
    if " " in status_message:
        return status_message
    return f"{status_message[:3]} {status_message[3:7]} {status_message[7:]}"


def decode_snapshot(
    data: bytes, state: SessionState, config: CodecConfig | None = None
) -> DeviceSnapshot:
    """Decode one message against the session state.

    The state is only updated once the whole message has been read.

    Args:
        data: Message produced by the matching encode call
        state: Session state of the receiving side; updated in place
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Reconstructed snapshot, measurements labelled with the configured units

    Raises:
        OutOfData: If the message is truncated
        UnsupportedCharacter: If a packed character code is invalid
        DecodeError: If the message refers to a value the session never received
    """
    config = config or CodecConfig()
    layout = snapshot_layout()
    reader = BitReader(data)

    unchanged = {field.name: reader.read_bit() for field in flagged_fields(layout)}

    values: Dict[str, Any] = {}
    for field in layout:
        previous = getattr(state, field.name)

        if field.emission is Emission.ALWAYS:
            values[field.name] = read_value(reader, field)

        elif field.emission is Emission.DELTA:
            values[field.name] = (previous + read_value(reader, field)) & UINT64_MASK

        elif field.emission is Emission.FLAGGED:
            if not unchanged[field.name]:
                values[field.name] = read_value(reader, field)
            elif previous is None:
                raise DecodeError(
                    f"Field {field.name} flagged unchanged but no previous value is known"
                )
            else:
                values[field.name] = previous

        elif field.emission is Emission.ON_CHANGE:
            # No flag bit: the encoder sends the value in the first message only
            values[field.name] = read_value(reader, field) if previous is None else previous

    status = values["status_message"]
    if not unchanged["status_message"] and len(status) != STATUS_LENGTH:
        raise DecodeError(
            f"Field status_message: expected {STATUS_LENGTH} characters, got {len(status)}"
        )

    try:
        snapshot = DeviceSnapshot(
            name=values["name"],
            identifier=values["identifier"],
            status_message=format_status(status),
            self_check_passed=values["self_check_passed"],
            service_mode_enabled=values["service_mode_enabled"],
            uptime_seconds=values["uptime_seconds"],
            pressure=PhysicalValue(value=values["pressure"], unit=config.pressure_unit),
            temperature=PhysicalValue(value=values["temperature"], unit=config.temperature_unit),
            distance=PhysicalValue(value=values["distance"], unit=config.distance_unit),
        )
    except ValueError as e:
        raise DecodeError(f"Failed to construct DeviceSnapshot: {e}") from e

    state.update(values)

    logger.debug(
        "Decoded snapshot: %d of %d bits used, unchanged=%s",
        reader.position(),
        len(data) * 8,
        sorted(name for name, flag in unchanged.items() if flag),
    )
    return snapshot
