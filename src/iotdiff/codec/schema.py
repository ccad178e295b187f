"""Wire layout of the snapshot stream.

The schema is closed: every field of a DeviceSnapshot has one wire kind and
one emission policy, and the order of ``snapshot_layout()`` is the order of
payloads in the stream. The "unchanged" flag bits that open every message
follow the same order, restricted to FLAGGED fields.
"""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass
from typing import Any, List
from uuid import UUID

from ..exceptions import EncodeError, SchemaError
from . import alphabet
from .bitpack import BitReader, BitWriter

NAME_LENGTH = 12
STATUS_LENGTH = 10
UINT32_MASK = 0xFFFFFFFF


class FieldKind(enum.Enum):
    """Raw value kinds that can appear in the stream."""

    BOOL = "bool"
    UINT32 = "uint32"
    FLOAT32 = "float32"
    UUID128 = "uuid128"
    LETTERS = "letters"


class Emission(enum.Enum):
    """When a field's payload is present in a message.

    ALWAYS: payload in every message.
    DELTA: payload in every message, as the difference to the previous value.
    FLAGGED: an "unchanged" bit in the message header; payload only if changed.
    ON_CHANGE: payload only if changed, with no flag bit. The decoder reads it
        exactly once, when the session has no value for it yet.
    """

    ALWAYS = "always"
    DELTA = "delta"
    FLAGGED = "flagged"
    ON_CHANGE = "on_change"


@dataclass(frozen=True)
class WireField:
    """Schema information for a single field.

    Attributes:
        name: Snapshot attribute and SessionState slot
        kind: Raw value kind of the payload
        emission: Emission policy
        length: Character count for LETTERS fields, 0 otherwise
    """

    name: str
    kind: FieldKind
    emission: Emission
    length: int = 0

    def bits_required(self) -> int:
        """Return the payload size in bits (flag bit not included).

        Raises:
            SchemaError: If a LETTERS field has no length
        """
        if self.kind is FieldKind.LETTERS:
            if self.length <= 0:
                raise SchemaError(f"Field {self.name}: letters field requires a length")
            return self.length * alphabet.LETTER_BITS
        return _KIND_BITS[self.kind]


_KIND_BITS = {
    FieldKind.BOOL: 1,
    FieldKind.UINT32: 32,
    FieldKind.FLOAT32: 32,
    FieldKind.UUID128: 128,
}


def snapshot_layout() -> List[WireField]:
    """Return the payload order of a snapshot message.

    Names shorter than NAME_LENGTH are padded with the alphabet's fill code.
    """
    return [
        WireField("name", FieldKind.LETTERS, Emission.ON_CHANGE, NAME_LENGTH),
        WireField("identifier", FieldKind.UUID128, Emission.ALWAYS),
        WireField("status_message", FieldKind.LETTERS, Emission.FLAGGED, STATUS_LENGTH),
        WireField("self_check_passed", FieldKind.BOOL, Emission.FLAGGED),
        WireField("service_mode_enabled", FieldKind.BOOL, Emission.FLAGGED),
        WireField("uptime_seconds", FieldKind.UINT32, Emission.DELTA),
        WireField("pressure", FieldKind.FLOAT32, Emission.FLAGGED),
        WireField("temperature", FieldKind.FLOAT32, Emission.FLAGGED),
        WireField("distance", FieldKind.FLOAT32, Emission.FLAGGED),
    ]


def flagged_fields(layout: List[WireField]) -> List[WireField]:
    """Return the fields that own an "unchanged" bit, in header order."""
    return [field for field in layout if field.emission is Emission.FLAGGED]


def write_value(writer: BitWriter, field: WireField, value: Any) -> None:
    """Write one payload of the field's kind.

    Multi-byte numbers are little-endian and the identifier uses the mixed
    endian GUID byte order (``UUID.bytes_le``). FLOAT32 values are narrowed
    to single precision, so magnitudes beyond its range become infinite.

    Raises:
        EncodeError: If the value cannot be represented by the kind
        UnsupportedCharacter: If a LETTERS value leaves the alphabet
    """
    kind = field.kind

    if kind is FieldKind.BOOL:
        writer.write_bit(bool(value))
        return

    if kind is FieldKind.UINT32:
        writer.write_bytes(struct.pack("<I", value & UINT32_MASK))
        return

    if kind is FieldKind.FLOAT32:
        try:
            packed = struct.pack("<f", value)
        except OverflowError:
            # Out of single-precision range: narrows to infinity of the same sign
            packed = struct.pack("<f", math.copysign(math.inf, value))
        writer.write_bytes(packed)
        return

    if kind is FieldKind.UUID128:
        writer.write_bytes(value.bytes_le)
        return

    if kind is FieldKind.LETTERS:
        if len(value) > field.length:
            raise EncodeError(
                f"Field {field.name}: expected at most {field.length} characters, "
                f"got {len(value)} characters"
            )
        packed = alphabet.encode(value, letters_only=True, width=field.length)
        writer.write_bits(packed, field.bits_required())
        return

    raise SchemaError(f"Field {field.name}: unsupported kind {kind}")


def read_value(reader: BitReader, field: WireField) -> Any:
    """Read one payload of the field's kind.

    Raises:
        OutOfData: If the buffer ends inside the payload
        UnsupportedCharacter: If a LETTERS payload holds an invalid code
    """
    kind = field.kind

    if kind is FieldKind.BOOL:
        return reader.read_bit()

    if kind is FieldKind.UINT32:
        return struct.unpack("<I", reader.read_bytes(4))[0]

    if kind is FieldKind.FLOAT32:
        return struct.unpack("<f", reader.read_bytes(4))[0]

    if kind is FieldKind.UUID128:
        return UUID(bytes_le=reader.read_bytes(16))

    if kind is FieldKind.LETTERS:
        codes = reader.read_bytes(field.length, bits_per_unit=alphabet.LETTER_BITS)
        return alphabet.decode(codes, letters_only=True)

    raise SchemaError(f"Field {field.name}: unsupported kind {kind}")
