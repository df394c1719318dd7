"""
Delete Assignment Use Case
"""

import logging
from uuid import UUID

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.errors import assignment_not_found, insufficient_permission
from riskengine.domain.permissions import Action, authorize
from riskengine.libs.result import Result, Return

from .dtos import DeleteAssignmentResponse

logger = logging.getLogger(__name__)


class DeleteAssignmentUseCase:
    """
    Use case for deleting an assignment.

    Business Rules:
    - Caller role must allow delete_assignment
    - No other record depends on an assignment, deletion is unconditional
    - Deletion is not audited
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, assignment_id: UUID) -> Result[DeleteAssignmentResponse]:
        if not authorize(actor.role, Action.delete_assignment):
            return Return.err(insufficient_permission(Action.delete_assignment.value))

        async with self.uow:
            assignment = await self.uow.assignments.get_by_id(assignment_id)
            if assignment is None:
                return Return.err(assignment_not_found())

            await self.uow.assignments.delete(assignment)
            await self.uow.commit()

            logger.info(f"Assignment {assignment.assignment_id} deleted by {actor.user_id}")
            return Return.ok(DeleteAssignmentResponse(status="deleted"))
