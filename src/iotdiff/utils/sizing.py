"""Message size calculation utilities.

This module computes the size bounds of snapshot messages from the wire
layout without encoding anything.
"""

from __future__ import annotations

from ..codec.schema import Emission, flagged_fields, snapshot_layout


def field_sizes() -> dict[str, int]:
    """Get the payload size in bits of each field.

    Example:
        >>> field_sizes()["identifier"]
        128
    """
    return {field.name: field.bits_required() for field in snapshot_layout()}


def header_bits() -> int:
    """Number of "unchanged" flag bits that open every message."""
    return len(flagged_fields(snapshot_layout()))


def max_encoded_bits() -> int:
    """Size in bits of a message that carries every payload (a first snapshot)."""
    return header_bits() + sum(field_sizes().values())


def min_encoded_bits() -> int:
    """Size in bits of a message in which nothing changed.

    Only the header and the unconditional payloads remain.
    """
    always = (Emission.ALWAYS, Emission.DELTA)
    return header_bits() + sum(
        field.bits_required() for field in snapshot_layout() if field.emission in always
    )


def max_encoded_size() -> int:
    """Size in bytes of a first snapshot message (rounded up)."""
    return (max_encoded_bits() + 7) // 8


def min_encoded_size() -> int:
    """Size in bytes of a message in which nothing changed (rounded up)."""
    return (min_encoded_bits() + 7) // 8
