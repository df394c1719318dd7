"""
Assignment Use Case DTOs (Data Transfer Objects)

Command and Response classes for the assignment domain.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from riskengine.domain.entities import Assignment


# ============================================================================
# Command DTOs
# ============================================================================


class CreateAssignmentCommand(BaseModel):
    """Validated intent to hand a risk to a user"""

    risk_id: UUID
    assigned_to: UUID
    priority_level: str
    deadline_date: datetime
    notes: Optional[str] = None
    assignment_status: Optional[str] = None


class UpdateAssignmentCommand(BaseModel):
    """Partial update; None means keep the stored value"""

    assignment_status: Optional[str] = None
    priority_level: Optional[str] = None
    deadline_date: Optional[datetime] = None
    notes: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AssignmentResponse(BaseModel):
    id: str
    assignment_id: str
    risk_id: str
    assigned_to: str
    assigned_by: str
    assignment_date: datetime
    assignment_status: str
    priority_level: str
    deadline_date: datetime
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, assignment: Assignment) -> "AssignmentResponse":
        return cls(
            id=str(assignment.id),
            assignment_id=assignment.assignment_id,
            risk_id=str(assignment.risk_id),
            assigned_to=str(assignment.assigned_to),
            assigned_by=str(assignment.assigned_by),
            assignment_date=assignment.assignment_date,
            assignment_status=assignment.assignment_status.value,
            priority_level=assignment.priority_level.value,
            deadline_date=assignment.deadline_date,
            notes=assignment.notes,
            created_at=assignment.created_at,
            updated_at=assignment.updated_at,
        )


class AssignmentListResponse(BaseModel):
    assignments: List[AssignmentResponse]


class DeleteAssignmentResponse(BaseModel):
    status: str
