"""
Claims processor: files claims against policies and adjudicates them.

Adjudication is automatic and data-driven. A pending claim is approved when
the latest reading of the policy's trigger feed is greater than or equal to
the policy's trigger value, and rejected otherwise. Either way the claim is
final; it can never be processed again.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import replace

from app.core.clock import Clock
from app.core.policy_model import Claim, ClaimStatus, validate_name, validate_uint
from app.core.record_store import RecordStore, SequenceCounter
from app.core.result import Err, ErrorKind, Ok, Result
from app.services.oracle_service import OracleRegistry
from app.services.policy_service import PolicyRegistry


logger = logging.getLogger(__name__)


def adjudicate(observed_value: int, trigger_value: int) -> ClaimStatus:
    """
    Decide a claim from a feed reading and a policy threshold.

    Exact integer comparison; a reading equal to the threshold approves.
    """
    if observed_value >= trigger_value:
        return ClaimStatus.APPROVED
    return ClaimStatus.REJECTED


class ClaimsProcessor:
    """
    Owns Claim records and the claim ID sequence.

    The policy and oracle registries are injected so tests can swap them
    for doubles.
    """

    def __init__(
        self,
        policies: PolicyRegistry,
        oracle: OracleRegistry,
        clock: Clock,
        payout_amount: int,
    ):
        self._policies = policies
        self._oracle = oracle
        self._clock = clock
        self._payout_amount = validate_uint(payout_amount, field_label="payout_amount")
        self._claims: RecordStore[int, Claim] = RecordStore()
        self._ids = SequenceCounter()
        self._lock = threading.Lock()

    @property
    def last_claim_id(self) -> int:
        """ID of the most recently filed claim, 0 if none exist."""
        return self._ids.last

    def __len__(self) -> int:
        return len(self._claims)

    def file_claim(self, caller: str, policy_id: int) -> Result[int]:
        """
        File a pending claim against `policy_id`.

        The policy is not looked up here; a missing policy only surfaces
        when the claim is processed. The claim amount is the configured
        fixed payout.

        Returns:
            Ok with the new claim ID.
        """
        validate_name(caller, field_label="caller")
        validate_uint(policy_id, field_label="policy_id")

        with self._lock:
            claim_id = self._ids.next_id()
            self._claims.put(
                claim_id,
                Claim(
                    claim_id=claim_id,
                    policy_id=policy_id,
                    claimant=caller,
                    amount=self._payout_amount,
                    status=ClaimStatus.PENDING,
                    processed_at=0,
                ),
            )

        logger.info(
            "Claim filed",
            extra={"claim_id": claim_id, "policy_id": policy_id, "caller": caller},
        )
        return Ok(claim_id)

    def process_claim(self, caller: str, claim_id: int) -> Result[bool]:
        """
        Adjudicate a pending claim. Any caller may trigger this.

        Steps:
        1. Fail with `unauthorized` if the claim is unknown or not pending.
        2. Read the bound policy; a `not-found` is returned as-is and the
           claim stays pending.
        3. Read the observation for the policy's trigger feed; a
           `not-found` is returned as-is and the claim stays pending.
        4. Approve if reading >= trigger value, reject otherwise, and stamp
           `processed_at` with the current time.

        Returns:
            Ok(True) if approved, Ok(False) if rejected.
        """
        with self._lock:
            claim = self._claims.get(claim_id)
            if claim is None or not claim.is_pending:
                logger.warning(
                    "Rejected claim processing",
                    extra={"claim_id": claim_id, "caller": caller},
                )
                return Err(ErrorKind.UNAUTHORIZED)

            policy_result = self._policies.get_policy(claim.policy_id)
            if not policy_result.is_ok:
                logger.warning(
                    "Claim left pending: policy lookup failed",
                    extra={"claim_id": claim_id, "policy_id": claim.policy_id},
                )
                return policy_result
            policy = policy_result.value

            oracle_result = self._oracle.get_oracle_data(policy.trigger_condition)
            if not oracle_result.is_ok:
                logger.warning(
                    "Claim left pending: no oracle data for feed",
                    extra={"claim_id": claim_id, "feed_name": policy.trigger_condition},
                )
                return oracle_result
            observation = oracle_result.value

            status = adjudicate(observation.value, policy.trigger_value)
            self._claims.put(
                claim_id,
                replace(claim, status=status, processed_at=self._clock.now()),
            )

        logger.info(
            "Claim %s",
            status.value,
            extra={
                "claim_id": claim_id,
                "policy_id": policy.policy_id,
                "observed_value": observation.value,
                "trigger_value": policy.trigger_value,
            },
        )
        return Ok(status is ClaimStatus.APPROVED)

    def get_claim(self, claim_id: int) -> Result[Claim]:
        """Return a snapshot of the claim, or `not-found`."""
        with self._lock:
            claim = self._claims.get(claim_id)
        if claim is None:
            return Err(ErrorKind.NOT_FOUND)
        return Ok(claim)


__all__ = ["ClaimsProcessor", "adjudicate"]
