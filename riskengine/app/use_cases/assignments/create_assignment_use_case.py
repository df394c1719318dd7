"""
Create Assignment Use Case

Hands a risk to a user and moves the risk along its lifecycle.
"""

import logging

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.base import to_naive_utc, utcnow
from riskengine.domain.entities import (
    Assignment,
    AssignmentStatus,
    IdentifierKind,
    PriorityLevel,
    RiskUpdate,
    UpdateType,
)
from riskengine.domain.errors import insufficient_permission, risk_not_found, validation_error
from riskengine.domain.identifiers import current_period
from riskengine.domain.permissions import Action, authorize
from riskengine.domain.validation import parse_choice, validate_deadline
from riskengine.libs.result import Result, Return

from .dtos import AssignmentResponse, CreateAssignmentCommand

logger = logging.getLogger(__name__)


class CreateAssignmentUseCase:
    """
    Use case for assigning a risk to a user.

    Business Rules:
    - Caller role must allow assign_risk
    - Priority from Critical/High/Medium/Low, status defaults to Pending
    - Deadline strictly after now; checked before anything is written
    - Risk must exist, assignee must be a known user
    - One transaction covers all of:
      1. allocating assignment_id (ASGN-YYYY-MM-NNNN)
      2. inserting the assignment
      3. moving the risk Identified -> Assigned (only from exactly Identified)
      4. appending an "Assignment Created" record with new_value = assignment_id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, command: CreateAssignmentCommand
    ) -> Result[AssignmentResponse]:
        if not authorize(actor.role, Action.create_assignment):
            return Return.err(insufficient_permission(Action.create_assignment.value))

        priority = parse_choice(
            PriorityLevel, command.priority_level, "INVALID_PRIORITY", "priority level"
        )
        if priority.is_err():
            return Return.err(priority.error)

        status = AssignmentStatus.pending
        if command.assignment_status is not None:
            parsed_status = parse_choice(
                AssignmentStatus, command.assignment_status, "INVALID_STATUS", "assignment status"
            )
            if parsed_status.is_err():
                return Return.err(parsed_status.error)
            status = parsed_status.value

        now = utcnow()
        deadline = to_naive_utc(command.deadline_date)
        deadline_error = validate_deadline(deadline, now)
        if deadline_error:
            return Return.err(deadline_error)

        async with self.uow:
            risk = await self.uow.risks.get_by_id_for_update(command.risk_id)
            if risk is None:
                return Return.err(risk_not_found())

            assignee = await self.uow.users.get_by_id(command.assigned_to)
            if assignee is None:
                return Return.err(
                    validation_error("ASSIGNEE_NOT_FOUND", "Assigned user does not exist")
                )

            assignment_id = await self.uow.sequences.next_id(
                IdentifierKind.assignment, current_period(now)
            )

            assignment = Assignment(
                assignment_id=assignment_id,
                risk_id=risk.id,
                assigned_to=assignee.id,
                assigned_by=actor.user_id,
                assignment_date=now,
                assignment_status=status,
                priority_level=priority.value,
                deadline_date=deadline,
                notes=command.notes,
                created_at=now,
                updated_at=now,
            )
            assignment = await self.uow.assignments.create(assignment)

            advanced = await self.uow.risks.mark_assigned_if_identified(risk.id)

            await self.uow.risk_updates.create(
                RiskUpdate(
                    risk_id=risk.id,
                    updated_by=actor.user_id,
                    update_type=UpdateType.ASSIGNMENT_CREATED,
                    new_value=assignment_id,
                )
            )

            await self.uow.commit()

            logger.info(
                f"Assignment {assignment_id} created for risk {risk.risk_id}"
                + (" (risk now Assigned)" if advanced else "")
            )
            return Return.ok(AssignmentResponse.from_entity(assignment))
