"""Wire layout report CLI command."""

from __future__ import annotations

from ..codec.schema import Emission, flagged_fields, snapshot_layout
from ..utils.sizing import (
    header_bits,
    max_encoded_bits,
    max_encoded_size,
    min_encoded_bits,
    min_encoded_size,
)

_EMISSION_NOTES = {
    Emission.ALWAYS: "every message",
    Emission.DELTA: "every message, delta",
    Emission.FLAGGED: "if flagged changed",
    Emission.ON_CHANGE: "first message only",
}


def print_layout() -> None:
    """Print the snapshot wire layout and its size bounds."""
    layout = snapshot_layout()

    print("|" * 7, "iotdiff: Differential Telemetry Codec", "|" * 7)
    print("Field sizes are in bits unless otherwise noted.")
    print()

    print(f"{'-' * 27} Header {'-' * 27}")
    for i, field in enumerate(flagged_fields(layout), 1):
        field_desc = f"{i}. {field.name} unchanged"
        dots = "." * max(1, 54 - len(field_desc) - len("1 bits"))
        print(f"        {field_desc}{dots}1 bits")
    print()

    print(f"{'-' * 28} Body {'-' * 28}")
    for i, field in enumerate(layout, 1):
        bits = field.bits_required()
        field_desc = f"{i}. {field.name}"
        field_info = f"({field.kind.value}, {_EMISSION_NOTES[field.emission]})"
        dots_needed = 54 - len(field_desc) - len(str(bits)) - len(" bits")
        dots = "." * max(1, dots_needed)
        print(f"        {field_desc}{dots}{bits} bits {field_info}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Header: {header_bits()} bits")
    print(f"First snapshot: {max_encoded_size()} bytes / {max_encoded_bits()} bits")
    print(f"Unchanged snapshot: {min_encoded_size()} bytes / {min_encoded_bits()} bits")
    print()
