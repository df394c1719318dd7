"""
Get Risk Updates Use Case

Reads a risk's activity timeline with pagination.
"""

from typing import Optional
from uuid import UUID

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.errors import insufficient_permission
from riskengine.domain.permissions import Action, authorize
from riskengine.libs.result import Result, Return

from .dtos import RiskUpdateResponse, RiskUpdatesPage


class GetRiskUpdatesUseCase:
    """
    Use case for retrieving the audit records of a risk.

    Business Rules:
    - Caller role must allow view_risks
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Records of a deleted risk remain readable
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: Actor,
        risk_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[RiskUpdatesPage]:
        if not authorize(actor.role, Action.view_risks):
            return Return.err(insufficient_permission(Action.view_risks.value))

        async with self.uow:
            records, next_cursor = await self.uow.risk_updates.get_by_risk_paginated(
                risk_id, limit=limit, cursor=cursor
            )

            return Return.ok(
                RiskUpdatesPage(
                    updates=[RiskUpdateResponse.from_entity(r) for r in records],
                    next_cursor=next_cursor,
                )
            )
