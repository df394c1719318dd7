"""
List Risks Use Case

Risk register with optional category, status and text filters.
"""

from typing import Optional

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.entities import RiskCategory, RiskStatus
from riskengine.domain.errors import insufficient_permission
from riskengine.domain.permissions import Action, authorize
from riskengine.domain.validation import parse_choice
from riskengine.libs.result import Result, Return

from .dtos import RiskListResponse, RiskResponse


class ListRisksUseCase:
    """
    Use case for browsing the risk register.

    Business Rules:
    - Caller role must allow view_risks
    - Category and status filters must name known labels
    - search matches risk_id or description, case-insensitively
    - Newest risks first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        category: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Result[RiskListResponse]:
        if not authorize(actor.role, Action.view_risks):
            return Return.err(insufficient_permission(Action.view_risks.value))

        category_filter = status_filter = None
        if category:
            parsed = parse_choice(RiskCategory, category, "INVALID_CATEGORY", "risk category")
            if parsed.is_err():
                return Return.err(parsed.error)
            category_filter = parsed.value

        if status:
            parsed = parse_choice(RiskStatus, status, "INVALID_STATUS", "risk status")
            if parsed.is_err():
                return Return.err(parsed.error)
            status_filter = parsed.value

        async with self.uow:
            risks = await self.uow.risks.get_filtered(
                category=category_filter, status=status_filter, search=search or None
            )

            return Return.ok(RiskListResponse(risks=[RiskResponse.from_entity(r) for r in risks]))
