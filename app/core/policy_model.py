"""
Core domain records for policies, oracle observations and claims.

Records are frozen dataclasses. Stores replace a record on every change,
so anything handed out by a read is a snapshot the caller cannot mutate.
These models are independent of FastAPI/Pydantic and are reused by the
services and the HTTP schemas alike.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.core.config import INT_MAX, INT_MIN, UINT_MAX


class ClaimStatus(str, Enum):
    """Claim lifecycle states. `approved` and `rejected` are terminal."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def validate_uint(value: int, *, field_label: str = "value") -> int:
    """
    Validate an unsigned integer field.

    Raises:
        ValueError: If the value is not an int in ``[0, UINT_MAX]``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_label} must be an integer")
    if value < 0 or value > UINT_MAX:
        raise ValueError(f"{field_label} must be between 0 and {UINT_MAX}")
    return value


def validate_int(value: int, *, field_label: str = "value") -> int:
    """
    Validate a signed integer field.

    Raises:
        ValueError: If the value is not an int in ``[INT_MIN, INT_MAX]``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_label} must be an integer")
    if value < INT_MIN or value > INT_MAX:
        raise ValueError(f"{field_label} must be between {INT_MIN} and {INT_MAX}")
    return value


def validate_name(name: str, *, field_label: str = "name") -> str:
    """
    Validate an identity or feed name.

    Names are opaque tokens and are compared exactly; only empty or
    whitespace-only strings are rejected.

    Raises:
        ValueError: If the input is not a non-empty string.
    """
    if not isinstance(name, str):
        raise ValueError(f"{field_label} must be a string")
    if not name.strip():
        raise ValueError(f"{field_label} cannot be empty")
    return name


@dataclass(frozen=True)
class Policy:
    """
    A parametric insurance policy.

    Everything except `is_active` is fixed at creation. `start_time` and
    `end_time` are recorded but not enforced during adjudication.
    """

    policy_id: int
    policyholder: str
    coverage_amount: int
    premium: int
    start_time: int
    end_time: int
    trigger_condition: str
    trigger_value: int
    is_active: bool = True


@dataclass(frozen=True)
class OracleObservation:
    """Latest published reading for a feed. A new update replaces it."""

    feed_name: str
    value: int
    last_updated: int


@dataclass(frozen=True)
class Claim:
    """A claim filed against a policy, adjudicated at most once."""

    claim_id: int
    policy_id: int
    claimant: str
    amount: int
    status: ClaimStatus = ClaimStatus.PENDING
    processed_at: int = 0

    @property
    def is_pending(self) -> bool:
        return self.status is ClaimStatus.PENDING


__all__ = [
    "ClaimStatus",
    "Policy",
    "OracleObservation",
    "Claim",
    "validate_uint",
    "validate_int",
    "validate_name",
]
