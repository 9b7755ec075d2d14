"""
API routes for filing, processing and reading claims.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_caller, get_protocol
from app.routes.errors import unwrap
from app.schemas.protocol_schema import (
    ClaimCreate,
    ClaimCreated,
    ClaimDecision,
    ClaimResponse,
)
from app.services.protocol import Protocol


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/claims", tags=["claims"])


@router.post("", response_model=ClaimCreated, status_code=status.HTTP_201_CREATED)
def file_claim(
    payload: ClaimCreate,
    caller: str = Depends(get_caller),
    protocol: Protocol = Depends(get_protocol),
) -> ClaimCreated:
    """
    File a pending claim against a policy.

    The policy is not checked here; problems surface at processing time.
    """
    result = protocol.claims.file_claim(caller, payload.policy_id)
    return ClaimCreated(claim_id=unwrap(result, "Claim could not be filed"))


@router.post("/{claim_id}/process", response_model=ClaimDecision)
def process_claim(
    claim_id: int,
    caller: str = Depends(get_caller),
    protocol: Protocol = Depends(get_protocol),
) -> ClaimDecision:
    """
    Adjudicate a pending claim against the latest oracle reading.

    - Unknown or already processed claim -> HTTP 403
    - Missing policy or oracle feed -> HTTP 404, claim stays pending
    """
    try:
        result = protocol.claims.process_claim(caller, claim_id)
        approved = unwrap(result, f"Claim {claim_id} could not be processed")
        return ClaimDecision(claim_id=claim_id, approved=approved)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Unexpected error while processing claim", extra={"claim_id": claim_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process claim",
        ) from exc


@router.get("/{claim_id}", response_model=ClaimResponse)
def get_claim(claim_id: int, protocol: Protocol = Depends(get_protocol)) -> ClaimResponse:
    """
    Retrieve a claim by ID.
    """
    claim = unwrap(protocol.claims.get_claim(claim_id), f"Claim {claim_id} not found")
    return ClaimResponse.from_record(claim)
