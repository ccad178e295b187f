"""Base record class and iotdiff-specific Pydantic configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseRecord(BaseModel):
    """Base class for the immutable value objects handled by the codec.

    Records are frozen: the codec compares them field by field against its
    session state and never mutates what the caller hands in.
    """

    model_config = ConfigDict(
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        strict=False,
    )
