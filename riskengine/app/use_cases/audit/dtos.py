"""
Audit Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from riskengine.domain.entities import RiskUpdate


class LogRiskUpdateCommand(BaseModel):
    """Manual timeline entry, e.g. a progress note"""

    update_type: str = Field(..., min_length=1, max_length=100)
    comment: Optional[str] = None
    previous_value: Optional[str] = None
    new_value: Optional[str] = None


class RiskUpdateResponse(BaseModel):
    id: str
    risk_id: str
    updated_by: str
    update_type: str
    previous_value: Optional[str]
    new_value: Optional[str]
    comment: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, record: RiskUpdate) -> "RiskUpdateResponse":
        return cls(
            id=str(record.id),
            risk_id=str(record.risk_id),
            updated_by=str(record.updated_by),
            update_type=record.update_type,
            previous_value=record.previous_value,
            new_value=record.new_value,
            comment=record.comment,
            created_at=record.created_at,
        )


class RiskUpdatesPage(BaseModel):
    """One page of a risk's timeline, newest first"""

    updates: List[RiskUpdateResponse]
    next_cursor: Optional[str]
