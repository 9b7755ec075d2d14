"""
Tagged results returned by every protocol operation.

Domain failures are values, not exceptions: an operation returns either
`Ok(value)` or `Err(kind)`, and callers compare `kind` against `ErrorKind`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union


T = TypeVar("T")


class ErrorKind(str, Enum):
    """Stable error kinds; the values are part of the external contract."""
    UNAUTHORIZED = "unauthorized"
    OWNER_ONLY = "owner-only"
    NOT_FOUND = "not-found"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def error(self) -> str:
        """The string form of the error kind, e.g. ``"not-found"``."""
        return self.kind.value


Result = Union[Ok[T], Err]


__all__ = ["ErrorKind", "Ok", "Err", "Result"]
