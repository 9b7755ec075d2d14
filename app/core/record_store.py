"""
In-memory keyed record storage and sequential ID allocation.

`RecordStore` stands in for the external key-value store each component
owns. It performs no locking of its own; the owning service serializes
writes.
"""
from __future__ import annotations

from typing import Dict, Generic, Hashable, Optional, TypeVar


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class RecordStore(Generic[K, V]):
    """Keyed record store. Records are never deleted."""

    def __init__(self) -> None:
        self._records: Dict[K, V] = {}

    def get(self, key: K) -> Optional[V]:
        return self._records.get(key)

    def put(self, key: K, record: V) -> None:
        self._records[key] = record

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)


class SequenceCounter:
    """
    Monotonic ID allocator.

    IDs start at 1 and are never reused. Callers must hold their service
    lock around `next_id` so the increment is paired with the record write.
    """

    def __init__(self) -> None:
        self._last = 0

    @property
    def last(self) -> int:
        return self._last

    def next_id(self) -> int:
        self._last += 1
        return self._last


__all__ = ["RecordStore", "SequenceCounter"]
