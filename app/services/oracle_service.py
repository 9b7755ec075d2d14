"""
Oracle registry: latest observation per feed plus the updater allow-list.
"""
from __future__ import annotations

import logging
import threading
from typing import Dict

from app.core.clock import Clock
from app.core.policy_model import OracleObservation, validate_int, validate_name
from app.core.record_store import RecordStore
from app.core.result import Err, ErrorKind, Ok, Result


logger = logging.getLogger(__name__)


class OracleRegistry:
    """
    Owns feed observations and the updater allow-list.

    Only allow-listed identities may publish, and only the configured owner
    may edit the allow-list. The owner is not an updater unless it adds
    itself.
    """

    def __init__(self, clock: Clock, owner: str):
        self._clock = clock
        self._owner = validate_name(owner, field_label="owner")
        self._observations: RecordStore[str, OracleObservation] = RecordStore()
        self._updaters: Dict[str, bool] = {}
        self._lock = threading.Lock()

    @property
    def owner(self) -> str:
        return self._owner

    def __len__(self) -> int:
        return len(self._observations)

    def set_authorized_updater(
        self, caller: str, target_identity: str, is_authorized: bool
    ) -> Result[bool]:
        """
        Grant or revoke publishing rights for `target_identity`.

        Returns:
            Ok(True) on success, `owner-only` if `caller` is not the owner.
        """
        if caller != self._owner:
            logger.warning(
                "Non-owner attempted to change oracle updaters",
                extra={"caller": caller, "target_identity": target_identity},
            )
            return Err(ErrorKind.OWNER_ONLY)

        validate_name(target_identity, field_label="target_identity")
        if not isinstance(is_authorized, bool):
            raise ValueError("is_authorized must be a boolean")

        with self._lock:
            self._updaters[target_identity] = is_authorized

        logger.info(
            "Oracle updater %s",
            "authorized" if is_authorized else "revoked",
            extra={"target_identity": target_identity},
        )
        return Ok(True)

    def is_authorized_updater(self, identity: str) -> bool:
        """Whether `identity` may publish; unknown identities may not."""
        with self._lock:
            return self._updaters.get(identity, False) is True

    def update_oracle_data(self, caller: str, feed_name: str, value: int) -> Result[bool]:
        """
        Publish a new reading for `feed_name`, replacing any previous one.

        Returns:
            Ok(True) on success, `unauthorized` if `caller` is not allow-listed.
        """
        validate_name(feed_name, field_label="feed_name")
        validate_int(value, field_label="value")

        with self._lock:
            if self._updaters.get(caller, False) is not True:
                logger.warning(
                    "Unauthorized oracle update",
                    extra={"caller": caller, "feed_name": feed_name},
                )
                return Err(ErrorKind.UNAUTHORIZED)
            observation = OracleObservation(
                feed_name=feed_name,
                value=value,
                last_updated=self._clock.now(),
            )
            self._observations.put(feed_name, observation)

        logger.info(
            "Oracle feed updated",
            extra={"feed_name": feed_name, "value": value, "caller": caller},
        )
        return Ok(True)

    def get_oracle_data(self, feed_name: str) -> Result[OracleObservation]:
        """Return the latest observation for a feed, or `not-found`."""
        with self._lock:
            observation = self._observations.get(feed_name)
        if observation is None:
            return Err(ErrorKind.NOT_FOUND)
        return Ok(observation)


__all__ = ["OracleRegistry"]
