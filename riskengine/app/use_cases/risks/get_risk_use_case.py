"""
Get Risk Use Case

Loads one risk with its assignments.
"""

from uuid import UUID

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.app.use_cases.assignments.dtos import AssignmentResponse
from riskengine.domain.actor import Actor
from riskengine.domain.errors import insufficient_permission, risk_not_found
from riskengine.domain.permissions import Action, authorize
from riskengine.libs.result import Result, Return

from .dtos import RiskDetailResponse, RiskResponse


class GetRiskUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, risk_id: UUID) -> Result[RiskDetailResponse]:
        if not authorize(actor.role, Action.view_risks):
            return Return.err(insufficient_permission(Action.view_risks.value))

        async with self.uow:
            risk = await self.uow.risks.get_by_id(risk_id)
            if risk is None:
                return Return.err(risk_not_found())

            assignments = await self.uow.assignments.get_by_risk_id(risk.id)

            return Return.ok(
                RiskDetailResponse(
                    **RiskResponse.from_entity(risk).model_dump(),
                    assignments=[AssignmentResponse.from_entity(a) for a in assignments],
                )
            )
