"""
Get Assignment Use Case
"""

from uuid import UUID

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.errors import assignment_not_found, insufficient_permission
from riskengine.domain.permissions import Action, authorize
from riskengine.libs.result import Result, Return

from .dtos import AssignmentResponse


class GetAssignmentUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, assignment_id: UUID) -> Result[AssignmentResponse]:
        if not authorize(actor.role, Action.view_assignments):
            return Return.err(insufficient_permission(Action.view_assignments.value))

        async with self.uow:
            assignment = await self.uow.assignments.get_by_id(assignment_id)
            if assignment is None:
                return Return.err(assignment_not_found())

            return Return.ok(AssignmentResponse.from_entity(assignment))
