"""
Wiring for one complete instance of the protocol.

Each `Protocol` owns fresh, empty stores. Build one per process (or per
test); there is no shared module-level state inside the services.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.core import config
from app.core.clock import Clock, SystemClock
from app.services.claims_service import ClaimsProcessor
from app.services.oracle_service import OracleRegistry
from app.services.policy_service import PolicyRegistry


@dataclass
class Protocol:
    clock: Clock
    policies: PolicyRegistry
    oracle: OracleRegistry
    claims: ClaimsProcessor


def build_protocol(
    clock: Optional[Clock] = None,
    owner: Optional[str] = None,
    payout_amount: Optional[int] = None,
) -> Protocol:
    """
    Build a protocol instance with empty stores and counters at zero.

    Args:
        clock: Time source; defaults to the system clock.
        owner: Oracle owner identity; defaults to `ORACLE_OWNER`.
        payout_amount: Fixed claim amount; defaults to `CLAIM_PAYOUT_AMOUNT`.
    """
    clock = clock or SystemClock()
    policies = PolicyRegistry(clock)
    oracle = OracleRegistry(clock, owner if owner is not None else config.ORACLE_OWNER)
    claims = ClaimsProcessor(
        policies,
        oracle,
        clock,
        payout_amount if payout_amount is not None else config.CLAIM_PAYOUT_AMOUNT,
    )
    return Protocol(clock=clock, policies=policies, oracle=oracle, claims=claims)


__all__ = ["Protocol", "build_protocol"]
