"""
Pydantic schemas for the policy, oracle and claims endpoints.
"""
from typing import Any, Dict

from pydantic import BaseModel, Field, StrictBool, StrictInt

from app.core.config import INT_MAX, INT_MIN, UINT_MAX
from app.core.policy_model import Claim, ClaimStatus, OracleObservation, Policy


class PolicyCreate(BaseModel):
    """Request schema for opening a new policy."""
    coverage_amount: StrictInt = Field(..., ge=0, le=UINT_MAX, description="Payout ceiling")
    premium: StrictInt = Field(..., ge=0, le=UINT_MAX, description="Premium amount")
    duration: StrictInt = Field(..., ge=0, le=UINT_MAX, description="Length of the validity window")
    trigger_condition: str = Field(..., min_length=1, description="Oracle feed the policy watches")
    trigger_value: StrictInt = Field(..., ge=INT_MIN, le=INT_MAX, description="Approval threshold (inclusive)")

    class Config:
        json_schema_extra = {
            "example": {
                "coverage_amount": 1000,
                "premium": 50,
                "duration": 30,
                "trigger_condition": "temperature",
                "trigger_value": 35,
            }
        }


class PolicyCreated(BaseModel):
    policy_id: int


class PolicyResponse(BaseModel):
    """Snapshot of a stored policy."""
    policy_id: int
    policyholder: str
    coverage_amount: int
    premium: int
    start_time: int
    end_time: int
    trigger_condition: str
    trigger_value: int
    is_active: bool

    @classmethod
    def from_record(cls, policy: Policy) -> "PolicyResponse":
        return cls(
            policy_id=policy.policy_id,
            policyholder=policy.policyholder,
            coverage_amount=policy.coverage_amount,
            premium=policy.premium,
            start_time=policy.start_time,
            end_time=policy.end_time,
            trigger_condition=policy.trigger_condition,
            trigger_value=policy.trigger_value,
            is_active=policy.is_active,
        )


class UpdaterAuthorization(BaseModel):
    """Request schema for granting or revoking oracle publishing rights."""
    is_authorized: StrictBool = Field(..., description="Whether the identity may publish")


class UpdaterStatus(BaseModel):
    identity: str
    is_authorized: bool


class OracleUpdate(BaseModel):
    """Request schema for publishing a feed reading."""
    value: StrictInt = Field(..., ge=INT_MIN, le=INT_MAX, description="Latest reading")

    class Config:
        json_schema_extra = {"example": {"value": 40}}


class OracleObservationResponse(BaseModel):
    """Latest reading for a feed."""
    feed_name: str
    value: int
    last_updated: int

    @classmethod
    def from_record(cls, observation: OracleObservation) -> "OracleObservationResponse":
        return cls(
            feed_name=observation.feed_name,
            value=observation.value,
            last_updated=observation.last_updated,
        )


class ClaimCreate(BaseModel):
    """Request schema for filing a claim."""
    policy_id: StrictInt = Field(..., ge=0, le=UINT_MAX, description="Policy the claim is filed against")


class ClaimCreated(BaseModel):
    claim_id: int


class ClaimResponse(BaseModel):
    """Snapshot of a stored claim."""
    claim_id: int
    policy_id: int
    claimant: str
    amount: int
    status: ClaimStatus
    processed_at: int

    @classmethod
    def from_record(cls, claim: Claim) -> "ClaimResponse":
        return cls(
            claim_id=claim.claim_id,
            policy_id=claim.policy_id,
            claimant=claim.claimant,
            amount=claim.amount,
            status=claim.status,
            processed_at=claim.processed_at,
        )


class ClaimDecision(BaseModel):
    claim_id: int
    approved: bool


class OperationResult(BaseModel):
    success: bool = True


class ErrorDetail(BaseModel):
    """Body of a 403/404 protocol error."""
    error: str = Field(..., description="One of: unauthorized, owner-only, not-found")
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
