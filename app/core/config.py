"""
Process-wide configuration for the parametric insurance service.

Values are read once from the environment at import time. The oracle owner
identity is fixed configuration: nothing at runtime can change it.
"""
from __future__ import annotations

import os
from typing import Final


UINT_MAX: Final[int] = 2**128 - 1
INT_MIN: Final[int] = -(2**127)
INT_MAX: Final[int] = 2**127 - 1

DEFAULT_ORACLE_OWNER: Final[str] = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
DEFAULT_CLAIM_PAYOUT_AMOUNT: Final[int] = 1000


def _read_int(name: str, default: int) -> int:
    """
    Read an unsigned integer setting from the environment.

    Raises:
        ValueError: If the variable is set but is not a non-negative integer.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0 or value > UINT_MAX:
        raise ValueError(f"{name} must be between 0 and {UINT_MAX}")
    return value


ORACLE_OWNER: Final[str] = os.getenv("ORACLE_OWNER", DEFAULT_ORACLE_OWNER).strip()
CLAIM_PAYOUT_AMOUNT: Final[int] = _read_int("CLAIM_PAYOUT_AMOUNT", DEFAULT_CLAIM_PAYOUT_AMOUNT)
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
CALLER_HEADER: Final[str] = "X-Caller-Identity"

if not ORACLE_OWNER:
    raise ValueError("ORACLE_OWNER cannot be empty")


__all__ = [
    "UINT_MAX",
    "INT_MIN",
    "INT_MAX",
    "ORACLE_OWNER",
    "CLAIM_PAYOUT_AMOUNT",
    "LOG_LEVEL",
    "CALLER_HEADER",
]
