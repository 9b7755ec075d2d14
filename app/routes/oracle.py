"""
API routes for oracle feeds and the updater allow-list.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_caller, get_protocol
from app.routes.errors import unwrap
from app.schemas.protocol_schema import (
    OperationResult,
    OracleObservationResponse,
    OracleUpdate,
    UpdaterAuthorization,
    UpdaterStatus,
)
from app.services.protocol import Protocol


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/oracle", tags=["oracle"])


@router.put("/updaters/{identity}", response_model=OperationResult)
def set_authorized_updater(
    identity: str,
    payload: UpdaterAuthorization,
    caller: str = Depends(get_caller),
    protocol: Protocol = Depends(get_protocol),
) -> OperationResult:
    """
    Grant or revoke publishing rights. Owner only.
    """
    try:
        result = protocol.oracle.set_authorized_updater(caller, identity, payload.is_authorized)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    unwrap(result, "Only the oracle owner may change updaters")
    return OperationResult(success=True)


@router.get("/updaters/{identity}", response_model=UpdaterStatus)
def get_updater_status(identity: str, protocol: Protocol = Depends(get_protocol)) -> UpdaterStatus:
    """
    Report whether an identity may publish oracle data.
    """
    return UpdaterStatus(
        identity=identity,
        is_authorized=protocol.oracle.is_authorized_updater(identity),
    )


@router.put("/feeds/{feed_name}", response_model=OperationResult)
def update_oracle_data(
    feed_name: str,
    payload: OracleUpdate,
    caller: str = Depends(get_caller),
    protocol: Protocol = Depends(get_protocol),
) -> OperationResult:
    """
    Publish the latest reading for a feed, replacing the previous one.
    """
    try:
        result = protocol.oracle.update_oracle_data(caller, feed_name, payload.value)
    except ValueError as exc:
        logger.warning(
            "Validation error while updating oracle feed: %s",
            exc,
            extra={"feed_name": feed_name},
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    unwrap(result, "Caller is not an authorized oracle updater")
    return OperationResult(success=True)


@router.get("/feeds/{feed_name}", response_model=OracleObservationResponse)
def get_oracle_data(
    feed_name: str, protocol: Protocol = Depends(get_protocol)
) -> OracleObservationResponse:
    """
    Retrieve the latest reading for a feed.
    """
    observation = unwrap(
        protocol.oracle.get_oracle_data(feed_name),
        f"No data published for feed {feed_name}",
    )
    return OracleObservationResponse.from_record(observation)
