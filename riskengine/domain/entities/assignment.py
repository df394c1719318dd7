"""
Assignment Entity

Hands a risk to a user with a priority and a deadline.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from riskengine.domain.base import utcnow

from .enums import AssignmentStatus, PriorityLevel, TERMINAL_ASSIGNMENT_STATUSES


class Assignment(SQLModel, table=True):
    """
    Assignment entity - links a Risk to the user responsible for it.

    Business Rules:
    - assignment_id (ASGN-YYYY-MM-NNNN) and risk_id are immutable once created
    - deadline_date must be in the future at creation; updates may leave it overdue
    - Completed and Cancelled are terminal; any other status blocks risk deletion
    """

    __tablename__ = "risk_assignments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    assignment_id: str = Field(unique=True, index=True, max_length=20)

    risk_id: UUID = Field(foreign_key="risks.id", nullable=False, index=True)
    assigned_to: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    assigned_by: UUID = Field(foreign_key="users.id", nullable=False)
    assignment_date: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    assignment_status: AssignmentStatus = Field(default=AssignmentStatus.pending)
    priority_level: PriorityLevel = Field(nullable=False)
    deadline_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    notes: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_assignment_status", "assignment_status"),
        Index("idx_assignment_risk_status", "risk_id", "assignment_status"),
    )

    @property
    def is_active(self) -> bool:
        return self.assignment_status not in TERMINAL_ASSIGNMENT_STATUSES
