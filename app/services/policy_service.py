"""
Policy registry: creation, cancellation and lookup of parametric policies.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import replace

from app.core.clock import Clock
from app.core.config import UINT_MAX
from app.core.policy_model import (
    Policy,
    validate_int,
    validate_name,
    validate_uint,
)
from app.core.record_store import RecordStore, SequenceCounter
from app.core.result import Err, ErrorKind, Ok, Result


logger = logging.getLogger(__name__)


class PolicyRegistry:
    """
    Owns Policy records and the policy ID sequence.

    Anyone may create a policy or read one; only the policyholder may
    cancel, and only while the policy is still active.
    """

    def __init__(self, clock: Clock):
        self._clock = clock
        self._policies: RecordStore[int, Policy] = RecordStore()
        self._ids = SequenceCounter()
        self._lock = threading.Lock()

    @property
    def last_policy_id(self) -> int:
        """ID of the most recently created policy, 0 if none exist."""
        return self._ids.last

    def __len__(self) -> int:
        return len(self._policies)

    def create_policy(
        self,
        caller: str,
        coverage_amount: int,
        premium: int,
        duration: int,
        trigger_condition: str,
        trigger_value: int,
    ) -> Result[int]:
        """
        Create a new active policy held by `caller`.

        The validity window starts now and lasts `duration` time units.

        Args:
            caller: Identity that becomes the policyholder.
            coverage_amount: Payout ceiling.
            premium: Premium amount (recorded only).
            duration: Length of the validity window.
            trigger_condition: Name of the oracle feed the policy watches.
            trigger_value: Threshold; claims are approved when the feed
                reading is greater than or equal to it.

        Returns:
            Ok with the new policy ID.

        Raises:
            ValueError: If any argument is malformed. No state is changed.
        """
        validate_name(caller, field_label="caller")
        validate_uint(coverage_amount, field_label="coverage_amount")
        validate_uint(premium, field_label="premium")
        validate_uint(duration, field_label="duration")
        validate_name(trigger_condition, field_label="trigger_condition")
        validate_int(trigger_value, field_label="trigger_value")

        with self._lock:
            start_time = self._clock.now()
            end_time = start_time + duration
            if end_time > UINT_MAX:
                raise ValueError("duration pushes end_time past the unsigned range")

            policy_id = self._ids.next_id()
            self._policies.put(
                policy_id,
                Policy(
                    policy_id=policy_id,
                    policyholder=caller,
                    coverage_amount=coverage_amount,
                    premium=premium,
                    start_time=start_time,
                    end_time=end_time,
                    trigger_condition=trigger_condition,
                    trigger_value=trigger_value,
                    is_active=True,
                ),
            )

        logger.info(
            "Policy created",
            extra={"policy_id": policy_id, "caller": caller, "trigger_condition": trigger_condition},
        )
        return Ok(policy_id)

    def cancel_policy(self, caller: str, policy_id: int) -> Result[bool]:
        """
        Deactivate a policy.

        Fails with `unauthorized` if the policy does not exist, the caller
        is not its policyholder, or it is already inactive. Cancelling twice
        is therefore an error, never a no-op.

        Returns:
            Ok(True) on success.
        """
        with self._lock:
            policy = self._policies.get(policy_id)
            if policy is None or policy.policyholder != caller or not policy.is_active:
                logger.warning(
                    "Rejected policy cancellation",
                    extra={"policy_id": policy_id, "caller": caller},
                )
                return Err(ErrorKind.UNAUTHORIZED)
            self._policies.put(policy_id, replace(policy, is_active=False))

        logger.info("Policy cancelled", extra={"policy_id": policy_id, "caller": caller})
        return Ok(True)

    def get_policy(self, policy_id: int) -> Result[Policy]:
        """Return a snapshot of the policy, or `not-found`."""
        with self._lock:
            policy = self._policies.get(policy_id)
        if policy is None:
            return Err(ErrorKind.NOT_FOUND)
        return Ok(policy)


__all__ = ["PolicyRegistry"]
