"""Stateful snapshot codec.

SnapshotCodec binds one SessionState to the encode and decode protocols.
Use one instance per device stream and per direction: the sending side only
calls encode(), the receiving side only calls decode(), in the same order.
"""

from __future__ import annotations

import logging

from ..config import CodecConfig
from ..models.snapshot import DeviceSnapshot
from .decoder import decode_snapshot
from .encoder import encode_snapshot
from .state import SessionState

logger = logging.getLogger(__name__)


class SnapshotCodec:
    """Differential codec for a single device stream.

    The instance is the shared history of the stream: every call compares
    against, and then updates, the values remembered from the previous call.
    It is not safe to share an instance between threads or devices.

    Example:
        >>> sender = SnapshotCodec()
        >>> receiver = SnapshotCodec()
        >>> for snapshot in snapshots:
        ...     frame = sender.encode(snapshot)
        ...     received = receiver.decode(frame)
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize a codec session.

        Args:
            config: Codec configuration (defaults to CodecConfig())
        """
        self.config = config or CodecConfig()
        self._state = SessionState()
        self.messages_encoded = 0
        self.messages_decoded = 0

    @property
    def state(self) -> SessionState:
        """The remembered values of this session."""
        return self._state

    def encode(self, snapshot: DeviceSnapshot) -> bytes:
        """Encode the next snapshot of the stream.

        Raises:
            EncodeError: If the snapshot violates a wire width
            UnsupportedCharacter: If a string field leaves its alphabet
        """
        data = encode_snapshot(snapshot, self._state, self.config)
        self.messages_encoded += 1
        return data

    def decode(self, data: bytes) -> DeviceSnapshot:
        """Decode the next message of the stream.

        On failure the peer has already advanced its own state, so the
        stream is out of step; reset() both ends before continuing.

        Raises:
            OutOfData: If the message is truncated
            UnsupportedCharacter: If a packed character code is invalid
            DecodeError: If the message does not fit the session state
        """
        snapshot = decode_snapshot(data, self._state, self.config)
        self.messages_decoded += 1
        return snapshot

    def reset(self) -> None:
        """Forget the session history; the next call is a first snapshot."""
        logger.info(
            "Resetting codec session after %d encoded / %d decoded messages",
            self.messages_encoded,
            self.messages_decoded,
        )
        self._state.reset()
        self.messages_encoded = 0
        self.messages_decoded = 0
