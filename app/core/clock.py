"""
Time sources.

The protocol queries "now" but does not own it. Production uses Unix
seconds; tests and replays use a settable clock.
"""
from __future__ import annotations

import time
from abc import ABC, abstractmethod

from app.core.policy_model import validate_uint


class Clock(ABC):
    """Interface for anything that can report the current timestamp."""

    @abstractmethod
    def now(self) -> int:
        """Current timestamp as an unsigned integer."""


class SystemClock(Clock):
    """Wall-clock time in whole Unix seconds."""

    def now(self) -> int:
        return int(time.time())


class FixedClock(Clock):
    """A clock that only moves when told to."""

    def __init__(self, timestamp: int = 0) -> None:
        self._timestamp = validate_uint(timestamp, field_label="timestamp")

    def now(self) -> int:
        return self._timestamp

    def set(self, timestamp: int) -> None:
        self._timestamp = validate_uint(timestamp, field_label="timestamp")

    def advance(self, seconds: int) -> int:
        self.set(self._timestamp + validate_uint(seconds, field_label="seconds"))
        return self._timestamp


__all__ = ["Clock", "SystemClock", "FixedClock"]
