"""
Risk Use Case DTOs (Data Transfer Objects)

Command and Response classes for the risk lifecycle.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from riskengine.app.use_cases.assignments.dtos import AssignmentResponse
from riskengine.domain.entities import Risk


# ============================================================================
# Command DTOs
# ============================================================================


class CreateRiskCommand(BaseModel):
    """Validated intent to record a new risk"""

    risk_category: str
    risk_description: str
    risk_source: str
    risk_trigger: Optional[str] = None
    status: Optional[str] = None


class UpdateRiskCommand(BaseModel):
    """Partial update; None means keep the stored value"""

    risk_category: Optional[str] = None
    risk_description: Optional[str] = None
    risk_source: Optional[str] = None
    risk_trigger: Optional[str] = None
    status: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class RiskResponse(BaseModel):
    id: str
    risk_id: str
    identified_by: str
    identification_date: datetime
    risk_category: str
    risk_description: str
    risk_source: str
    risk_trigger: Optional[str]
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, risk: Risk) -> "RiskResponse":
        return cls(
            id=str(risk.id),
            risk_id=risk.risk_id,
            identified_by=str(risk.identified_by),
            identification_date=risk.identification_date,
            risk_category=risk.risk_category.value,
            risk_description=risk.risk_description,
            risk_source=risk.risk_source.value,
            risk_trigger=risk.risk_trigger,
            status=risk.status.value,
            created_at=risk.created_at,
            updated_at=risk.updated_at,
        )


class RiskListResponse(BaseModel):
    risks: List[RiskResponse]


class RiskDetailResponse(RiskResponse):
    """Risk together with its assignments, newest first"""

    assignments: List[AssignmentResponse]


class DeleteRiskResponse(BaseModel):
    status: str
