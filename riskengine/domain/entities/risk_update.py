"""
RiskUpdate Entity

Immutable activity record forming a risk's timeline.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from riskengine.domain.base import utcnow


class RiskUpdate(SQLModel, table=True):
    """
    RiskUpdate entity - append-only audit record of a risk or assignment transition.

    Business Rules:
    - Immutable (never updated or deleted)
    - risk_id is a plain reference so the timeline outlives a deleted risk
    - update_type is a free-form label, e.g. "Status Change", "Assignment Created"
    """

    __tablename__ = "risk_updates"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    risk_id: UUID = Field(nullable=False, index=True)
    updated_by: UUID = Field(nullable=False, index=True)

    update_type: str = Field(max_length=100)
    previous_value: Optional[str] = Field(default=None)
    new_value: Optional[str] = Field(default=None)
    comment: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_risk_update_risk_created", "risk_id", "created_at"),)
