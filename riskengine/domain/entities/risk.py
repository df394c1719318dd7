"""
Risk Entity

An organizational risk tracked from identification to closure.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from riskengine.domain.base import utcnow

from .enums import RiskCategory, RiskSource, RiskStatus


class Risk(SQLModel, table=True):
    """
    Risk entity - subject of the lifecycle and of the audit timeline.

    Business Rules:
    - risk_id (RISK-YYYY-MM-NNNN) is unique, assigned once and never reused
    - risk_description is 20-1000 characters
    - Created in status Identified unless the creator says otherwise
    - Cannot be deleted while a non-terminal assignment references it
    """

    __tablename__ = "risks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    risk_id: str = Field(unique=True, index=True, max_length=20)

    identified_by: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    identification_date: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    risk_category: RiskCategory = Field(nullable=False)
    risk_description: str = Field(max_length=1000)
    risk_source: RiskSource = Field(nullable=False)
    risk_trigger: Optional[str] = Field(default=None)

    status: RiskStatus = Field(default=RiskStatus.identified)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_risk_status", "status"),
        Index("idx_risk_category", "risk_category"),
    )
