"""
API routes for opening, cancelling and reading policies.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_caller, get_protocol
from app.routes.errors import unwrap
from app.schemas.protocol_schema import (
    OperationResult,
    PolicyCreate,
    PolicyCreated,
    PolicyResponse,
)
from app.services.protocol import Protocol


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/policies", tags=["policies"])


@router.post("", response_model=PolicyCreated, status_code=status.HTTP_201_CREATED)
def create_policy(
    payload: PolicyCreate,
    caller: str = Depends(get_caller),
    protocol: Protocol = Depends(get_protocol),
) -> PolicyCreated:
    """
    Open a new policy held by the caller.
    """
    try:
        result = protocol.policies.create_policy(
            caller,
            payload.coverage_amount,
            payload.premium,
            payload.duration,
            payload.trigger_condition,
            payload.trigger_value,
        )
        return PolicyCreated(policy_id=unwrap(result, "Policy could not be created"))
    except ValueError as exc:
        logger.warning("Validation error while creating policy: %s", exc, extra={"caller": caller})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Unexpected error while creating policy", extra={"caller": caller})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create policy",
        ) from exc


@router.post("/{policy_id}/cancel", response_model=OperationResult)
def cancel_policy(
    policy_id: int,
    caller: str = Depends(get_caller),
    protocol: Protocol = Depends(get_protocol),
) -> OperationResult:
    """
    Cancel an active policy. Only the policyholder may cancel, and only once.
    """
    result = protocol.policies.cancel_policy(caller, policy_id)
    unwrap(result, f"Policy {policy_id} cannot be cancelled by this caller")
    return OperationResult(success=True)


@router.get("/{policy_id}", response_model=PolicyResponse)
def get_policy(policy_id: int, protocol: Protocol = Depends(get_protocol)) -> PolicyResponse:
    """
    Retrieve a policy by ID.
    """
    policy = unwrap(protocol.policies.get_policy(policy_id), f"Policy {policy_id} not found")
    return PolicyResponse.from_record(policy)
