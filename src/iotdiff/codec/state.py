"""Codec session state.

The remembered values of one device stream. Encoder and decoder each hold
one SessionState; they stay equal only while every encoded buffer is decoded,
in order, exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional
from uuid import UUID


@dataclass
class SessionState:
    """Last successfully encoded or decoded value of every snapshot field.

    ``None`` marks a field the session has not seen yet. The uptime
    accumulator starts at 0 and the measurements at 0.0, so a first reading
    of exactly 0.0 counts as unchanged on both ends.
    """

    name: Optional[str] = None
    identifier: Optional[UUID] = None
    status_message: Optional[str] = None
    self_check_passed: Optional[bool] = None
    service_mode_enabled: Optional[bool] = None
    uptime_seconds: int = 0
    pressure: float = 0.0
    temperature: float = 0.0
    distance: float = 0.0

    def update(self, values: Dict[str, Any]) -> None:
        """Commit a set of remembered values after a successful call."""
        for name, value in values.items():
            setattr(self, name, value)

    def reset(self) -> None:
        """Forget everything; the next call behaves as a first snapshot."""
        for field in fields(self):
            setattr(self, field.name, field.default)

    def as_dict(self) -> Dict[str, Any]:
        return {field.name: getattr(self, field.name) for field in fields(self)}
