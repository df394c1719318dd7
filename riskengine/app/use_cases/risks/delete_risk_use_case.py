"""
Delete Risk Use Case

Removes a risk that no longer has work in flight.
"""

import logging
from uuid import UUID

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.errors import conflict_error, insufficient_permission, risk_not_found
from riskengine.domain.permissions import Action, authorize
from riskengine.libs.result import Result, Return

from .dtos import DeleteRiskResponse

logger = logging.getLogger(__name__)


class DeleteRiskUseCase:
    """
    Use case for deleting a risk.

    Business Rules:
    - Caller role must allow delete_risk
    - Blocked while any assignment is Pending, In Progress or Under Review
    - Completed and Cancelled assignments are removed with the risk
    - The risk's audit records are kept
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, risk_id: UUID) -> Result[DeleteRiskResponse]:
        if not authorize(actor.role, Action.delete_risk):
            return Return.err(insufficient_permission(Action.delete_risk.value))

        async with self.uow:
            risk = await self.uow.risks.get_by_id_for_update(risk_id)
            if risk is None:
                return Return.err(risk_not_found())

            active = await self.uow.assignments.count_active_by_risk_id(risk.id)
            if active > 0:
                return Return.err(
                    conflict_error(
                        "RISK_HAS_ACTIVE_ASSIGNMENTS",
                        "Cannot delete risk with active assignments",
                    )
                )

            await self.uow.assignments.delete_by_risk_id(risk.id)
            await self.uow.risks.delete(risk)

            await self.uow.commit()

            logger.info(f"Risk {risk.risk_id} deleted by {actor.user_id}")
            return Return.ok(DeleteRiskResponse(status="deleted"))
