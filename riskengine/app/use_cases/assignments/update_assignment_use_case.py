"""
Update Assignment Use Case

Coalesce-style partial update of an assignment.
"""

import logging
from uuid import UUID

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.base import to_naive_utc
from riskengine.domain.entities import AssignmentStatus, PriorityLevel, RiskUpdate, UpdateType
from riskengine.domain.errors import assignment_not_found, insufficient_permission
from riskengine.domain.lifecycle import status_change
from riskengine.domain.permissions import Action, authorize
from riskengine.domain.validation import parse_choice
from riskengine.libs.result import Result, Return

from .dtos import AssignmentResponse, UpdateAssignmentCommand

logger = logging.getLogger(__name__)


class UpdateAssignmentUseCase:
    """
    Use case for editing an assignment.

    Business Rules:
    - Caller role must allow update_assignment
    - Only status, priority, deadline and notes are editable; omitted ones are kept
    - The deadline is not re-checked, assignments may become overdue
    - A status change appends one "Assignment Status Change" record on the owning risk
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, assignment_id: UUID, command: UpdateAssignmentCommand
    ) -> Result[AssignmentResponse]:
        if not authorize(actor.role, Action.update_assignment):
            return Return.err(insufficient_permission(Action.update_assignment.value))

        status = priority = None
        if command.assignment_status is not None:
            parsed = parse_choice(
                AssignmentStatus, command.assignment_status, "INVALID_STATUS", "assignment status"
            )
            if parsed.is_err():
                return Return.err(parsed.error)
            status = parsed.value

        if command.priority_level is not None:
            parsed = parse_choice(
                PriorityLevel, command.priority_level, "INVALID_PRIORITY", "priority level"
            )
            if parsed.is_err():
                return Return.err(parsed.error)
            priority = parsed.value

        async with self.uow:
            assignment = await self.uow.assignments.get_by_id(assignment_id)
            if assignment is None:
                return Return.err(assignment_not_found())

            change = status_change(assignment.assignment_status, status)

            if status is not None:
                assignment.assignment_status = status
            if priority is not None:
                assignment.priority_level = priority
            if command.deadline_date is not None:
                assignment.deadline_date = to_naive_utc(command.deadline_date)
            if command.notes is not None:
                assignment.notes = command.notes

            assignment = await self.uow.assignments.update(assignment)

            if change:
                await self.uow.risk_updates.create(
                    RiskUpdate(
                        risk_id=assignment.risk_id,
                        updated_by=actor.user_id,
                        update_type=UpdateType.ASSIGNMENT_STATUS_CHANGE,
                        previous_value=change.previous,
                        new_value=change.new,
                    )
                )

            await self.uow.commit()

            if change:
                logger.info(
                    f"Assignment {assignment.assignment_id} status {change.previous} -> {change.new}"
                )
            return Return.ok(AssignmentResponse.from_entity(assignment))
