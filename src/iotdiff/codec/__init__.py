"""Differential bit-packed codec for iotdiff.

This module provides the bit stream primitives, the restricted-alphabet
packing and the stateful encode/decode protocols built on them.
"""

from __future__ import annotations

from .bitpack import BitReader, BitWriter
from .decoder import decode_snapshot, format_status
from .encoder import encode_snapshot, near_equal, normalize_status
from .schema import Emission, FieldKind, WireField, snapshot_layout
from .session import SnapshotCodec
from .state import SessionState

__all__ = [
    "SnapshotCodec",
    "SessionState",
    "encode_snapshot",
    "decode_snapshot",
    "format_status",
    "normalize_status",
    "near_equal",
    "BitReader",
    "BitWriter",
    "Emission",
    "FieldKind",
    "WireField",
    "snapshot_layout",
]
