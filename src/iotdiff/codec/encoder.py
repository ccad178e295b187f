"""Differential snapshot encoder.

This module provides encode_snapshot(), which writes a DeviceSnapshot as a
difference against the values remembered in a SessionState.

Message layout:
    1. One "unchanged" bit per FLAGGED field, in layout order
    2. Payloads in layout order, each present according to its emission policy
    3. Zero padding to the next byte boundary
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import CodecConfig
from ..exceptions import EncodeError
from ..models.snapshot import DeviceSnapshot
from .bitpack import BitWriter
from .schema import (
    STATUS_LENGTH,
    UINT32_MASK,
    Emission,
    FieldKind,
    WireField,
    flagged_fields,
    snapshot_layout,
    write_value,
)
from .state import SessionState

logger = logging.getLogger(__name__)


def near_equal(previous: float, current: float, tolerance: float) -> bool:
    """Relative float comparison anchored to the remembered value.

    With ``previous == 0.0`` the allowed difference is 0, so any non-zero
    reading counts as changed.
    """
    return abs(previous - current) <= abs(previous) * tolerance


def normalize_status(status_message: str) -> str:
    """Return the wire form of a status message (spaces removed)."""
    return status_message.replace(" ", "")


def encode_snapshot(
    snapshot: DeviceSnapshot, state: SessionState, config: CodecConfig | None = None
) -> bytes:
    """Encode a snapshot against the session state.

    The state is only updated once the whole message has been written, so a
    failing call leaves the session as it was.

    Args:
        snapshot: Snapshot to encode
        state: Session state of the sending side; updated in place
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Packed message

    Raises:
        EncodeError: If the status message does not hold exactly 10 letters
            or the name is too long
        UnsupportedCharacter: If name or status leave the letters-only alphabet

    Examples:
        ```python
        state = SessionState()
        first = encode_snapshot(snapshot, state)   # every field
        second = encode_snapshot(snapshot, state)  # flags, identifier, uptime delta
        ```
    """
    config = config or CodecConfig()
    layout = snapshot_layout()
    current = _wire_values(snapshot)

    if len(current["status_message"]) != STATUS_LENGTH:
        raise EncodeError(
            f"Field status_message: expected {STATUS_LENGTH} characters without spaces, "
            f"got {len(current['status_message'])} characters"
        )

    writer = BitWriter()

    # Header: one "unchanged" bit per flagged field
    changed: Dict[str, bool] = {}
    for field in flagged_fields(layout):
        unchanged = _is_unchanged(field, getattr(state, field.name), current[field.name], config)
        writer.write_bit(unchanged)
        changed[field.name] = not unchanged

    # Payloads
    updates: Dict[str, Any] = {}
    for field in layout:
        value = current[field.name]
        previous = getattr(state, field.name)

        if field.emission is Emission.ALWAYS:
            write_value(writer, field, value)
            updates[field.name] = value

        elif field.emission is Emission.DELTA:
            write_value(writer, field, _uptime_delta(previous, value))
            updates[field.name] = value

        elif field.emission is Emission.FLAGGED:
            if changed[field.name]:
                write_value(writer, field, value)
                updates[field.name] = value

        elif field.emission is Emission.ON_CHANGE:
            if value != previous:
                if previous is not None:
                    logger.warning(
                        "Field %s changed from %r to %r mid-session; "
                        "the decoder keeps its first value",
                        field.name,
                        previous,
                        value,
                    )
                write_value(writer, field, value)
                updates[field.name] = value

    state.update(updates)

    encoded = writer.to_bytes()
    logger.debug(
        "Encoded snapshot: %d bits (%d bytes), changed=%s",
        writer.bit_length(),
        len(encoded),
        sorted(name for name, flag in changed.items() if flag),
    )
    return encoded


def _wire_values(snapshot: DeviceSnapshot) -> Dict[str, Any]:
    """Extract the transmitted value of every field."""
    return {
        "name": snapshot.name,
        "identifier": snapshot.identifier,
        "status_message": normalize_status(snapshot.status_message),
        "self_check_passed": snapshot.self_check_passed,
        "service_mode_enabled": snapshot.service_mode_enabled,
        "uptime_seconds": snapshot.uptime_seconds,
        "pressure": snapshot.pressure.value,
        "temperature": snapshot.temperature.value,
        "distance": snapshot.distance.value,
    }


def _is_unchanged(field: WireField, previous: Any, current: Any, config: CodecConfig) -> bool:
    if previous is None:
        return False
    if field.kind is FieldKind.FLOAT32:
        return near_equal(previous, current, config.tolerance)
    return bool(previous == current)


def _uptime_delta(previous: int, current: int) -> int:
    """Return the 32-bit uptime delta, warning when it cannot be represented."""
    delta = current - previous
    if delta < 0 or delta > UINT32_MASK:
        logger.warning(
            "Uptime delta %d does not fit 32 bits (previous=%d, current=%d); "
            "the decoded uptime will diverge",
            delta,
            previous,
            current,
        )
    return delta & UINT32_MASK
