"""
Assignment API Routes
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from riskengine.api.error import raise_for_error
from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.app.use_cases.assignments import (
    AssignmentListResponse,
    AssignmentResponse,
    CreateAssignmentCommand,
    CreateAssignmentUseCase,
    DeleteAssignmentResponse,
    DeleteAssignmentUseCase,
    GetAssignmentUseCase,
    ListAssignmentsUseCase,
    UpdateAssignmentCommand,
    UpdateAssignmentUseCase,
)
from riskengine.depends import get_current_user, get_unit_of_work
from riskengine.domain.actor import Actor

router = APIRouter(prefix="/assignments", tags=["Assignments"])


class CreateAssignmentRequest(BaseModel):
    """POST /assignments request payload"""

    risk_id: UUID = Field(..., description="Internal id of the risk")
    assigned_to: UUID = Field(..., description="User id of the assignee")
    priority_level: str = Field(..., description="Critical, High, Medium or Low")
    deadline_date: datetime = Field(..., description="Must be in the future")
    notes: Optional[str] = None
    assignment_status: Optional[str] = Field(None, description="Defaults to Pending")


class UpdateAssignmentRequest(BaseModel):
    """PUT /assignments/{id} request payload; omitted fields are left unchanged"""

    assignment_status: Optional[str] = None
    priority_level: Optional[str] = None
    deadline_date: Optional[datetime] = None
    notes: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AssignmentResponse)
async def create_assignment(
    request: CreateAssignmentRequest,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign a risk to a user.

    A risk still in Identified moves to Assigned, and the assignment is
    recorded on the risk's timeline.

    Raises:
        - 400 Bad Request: missing fields, invalid priority, deadline not in future,
          unknown assignee
        - 401 Unauthorized: missing or invalid token
        - 403 Forbidden: role lacks assign_risk
        - 404 Not Found: RISK_NOT_FOUND
    """
    use_case = CreateAssignmentUseCase(uow)
    result = await use_case.execute(
        current_user, CreateAssignmentCommand(**request.model_dump())
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=AssignmentListResponse)
async def list_assignments(
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    assignment_status: Optional[str] = Query(
        None, alias="status", description="Assignment status label"
    ),
    priority: Optional[str] = Query(None, description="Priority level label"),
    limit: Optional[int] = Query(
        None, ge=1, le=100, description="Maximum number of records to return"
    ),
):
    """
    Assignments across all risks, newest first.

    Raises:
        - 400 Bad Request: INVALID_STATUS, INVALID_PRIORITY
        - 403 Forbidden: role lacks view_assignments
    """
    use_case = ListAssignmentsUseCase(uow)
    result = await use_case.execute(
        current_user, status=assignment_status, priority=priority, limit=limit
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{assignment_id}", status_code=status.HTTP_200_OK, response_model=AssignmentResponse
)
async def get_assignment(
    assignment_id: UUID,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAssignmentUseCase(uow).execute(current_user, assignment_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{assignment_id}", status_code=status.HTTP_200_OK, response_model=AssignmentResponse
)
async def update_assignment(
    assignment_id: UUID,
    request: UpdateAssignmentRequest,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partially update an assignment.

    Raises:
        - 400 Bad Request: invalid status or priority
        - 403 Forbidden: role lacks update_assignment
        - 404 Not Found: ASSIGNMENT_NOT_FOUND
    """
    use_case = UpdateAssignmentUseCase(uow)
    result = await use_case.execute(
        current_user, assignment_id, UpdateAssignmentCommand(**request.model_dump())
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{assignment_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteAssignmentResponse,
)
async def delete_assignment(
    assignment_id: UUID,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete an assignment."""
    result = await DeleteAssignmentUseCase(uow).execute(current_user, assignment_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
