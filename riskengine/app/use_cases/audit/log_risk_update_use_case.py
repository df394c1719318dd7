"""
Log Risk Update Use Case

Appends a manual entry to a risk's timeline.
"""

from uuid import UUID

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.entities import RiskUpdate
from riskengine.domain.errors import insufficient_permission, risk_not_found
from riskengine.domain.permissions import Action, authorize
from riskengine.libs.result import Result, Return

from .dtos import LogRiskUpdateCommand, RiskUpdateResponse


class LogRiskUpdateUseCase:
    """
    Use case for recording free-form activity on a risk.

    Business Rules:
    - Caller role must allow update_risk
    - Risk must exist
    - The record is immutable once written
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, risk_id: UUID, command: LogRiskUpdateCommand
    ) -> Result[RiskUpdateResponse]:
        if not authorize(actor.role, Action.update_risk):
            return Return.err(insufficient_permission(Action.update_risk.value))

        async with self.uow:
            risk = await self.uow.risks.get_by_id(risk_id)
            if risk is None:
                return Return.err(risk_not_found())

            record = await self.uow.risk_updates.create(
                RiskUpdate(
                    risk_id=risk.id,
                    updated_by=actor.user_id,
                    update_type=command.update_type,
                    previous_value=command.previous_value,
                    new_value=command.new_value,
                    comment=command.comment,
                )
            )

            await self.uow.commit()

            return Return.ok(RiskUpdateResponse.from_entity(record))
