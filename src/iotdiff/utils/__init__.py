"""Utility functions for iotdiff."""

from __future__ import annotations

from .sizing import (
    field_sizes,
    header_bits,
    max_encoded_bits,
    max_encoded_size,
    min_encoded_bits,
    min_encoded_size,
)

__all__ = [
    "field_sizes",
    "header_bits",
    "max_encoded_bits",
    "max_encoded_size",
    "min_encoded_bits",
    "min_encoded_size",
]
