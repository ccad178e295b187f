"""Exception hierarchy for iotdiff.

All exceptions inherit from IotdiffError so callers can catch any
codec-specific failure with a single except clause.
"""

from __future__ import annotations


class IotdiffError(Exception):
    """Base exception for all iotdiff errors."""

    pass


class SchemaError(IotdiffError):
    """Raised when the wire layout or codec configuration is inconsistent."""

    pass


class EncodeError(IotdiffError):
    """Raised when a snapshot cannot be encoded.

    Examples:
        - Status message does not have exactly the configured payload length
        - Name longer than the fixed name width
    """

    pass


class DecodeError(IotdiffError):
    """Raised when a buffer cannot be decoded.

    Examples:
        - Truncated data (see OutOfData)
        - "Unchanged" flag for a field the session has never seen
    """

    pass


class OutOfData(DecodeError):
    """Raised when a read runs past the end of the input buffer."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Attempted to read past end of bit buffer: need {requested} bits, have {available}"
        )


class UnsupportedCharacter(EncodeError, DecodeError):
    """Raised for a character or code outside the active alphabet.

    Encoding reports the offending ``char``; decoding reports the offending
    ``code``. Either attribute is None when it does not apply.
    """

    def __init__(self, message: str, *, char: str | None = None, code: int | None = None) -> None:
        self.char = char
        self.code = code
        super().__init__(message)
