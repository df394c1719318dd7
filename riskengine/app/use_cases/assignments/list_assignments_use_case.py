"""
List Assignments Use Case
"""

from typing import Optional

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.entities import AssignmentStatus, PriorityLevel
from riskengine.domain.errors import insufficient_permission
from riskengine.domain.permissions import Action, authorize
from riskengine.domain.validation import parse_choice
from riskengine.libs.result import Result, Return

from .dtos import AssignmentListResponse, AssignmentResponse


class ListAssignmentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Result[AssignmentListResponse]:
        if not authorize(actor.role, Action.view_assignments):
            return Return.err(insufficient_permission(Action.view_assignments.value))

        status_filter = priority_filter = None
        if status:
            parsed = parse_choice(
                AssignmentStatus, status, "INVALID_STATUS", "assignment status"
            )
            if parsed.is_err():
                return Return.err(parsed.error)
            status_filter = parsed.value

        if priority:
            parsed = parse_choice(PriorityLevel, priority, "INVALID_PRIORITY", "priority level")
            if parsed.is_err():
                return Return.err(parsed.error)
            priority_filter = parsed.value

        async with self.uow:
            assignments = await self.uow.assignments.get_filtered(
                status=status_filter, priority=priority_filter, limit=limit
            )

            return Return.ok(
                AssignmentListResponse(
                    assignments=[AssignmentResponse.from_entity(a) for a in assignments]
                )
            )
