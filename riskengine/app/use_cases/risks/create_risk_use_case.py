"""
Create Risk Use Case

Records a newly identified risk under a fresh RISK-YYYY-MM-NNNN identifier.
"""

import logging

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.base import utcnow
from riskengine.domain.entities import IdentifierKind, Risk, RiskCategory, RiskSource, RiskStatus
from riskengine.domain.errors import insufficient_permission
from riskengine.domain.identifiers import current_period
from riskengine.domain.lifecycle import INITIAL_STATUS
from riskengine.domain.permissions import Action, authorize
from riskengine.domain.validation import parse_choice, validate_risk_description
from riskengine.libs.result import Result, Return

from .dtos import CreateRiskCommand, RiskResponse

logger = logging.getLogger(__name__)


class CreateRiskUseCase:
    """
    Use case for recording a new risk.

    Business Rules:
    - Caller role must allow create_risk
    - Description 20-1000 characters, category and source from the fixed lists
    - Status defaults to Identified; any enumerated status is accepted
    - risk_id is allocated inside the same transaction as the insert
    - Creation itself is not audited
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, command: CreateRiskCommand) -> Result[RiskResponse]:
        if not authorize(actor.role, Action.create_risk):
            return Return.err(insufficient_permission(Action.create_risk.value))

        description_error = validate_risk_description(command.risk_description)
        if description_error:
            return Return.err(description_error)

        parsed_category = parse_choice(RiskCategory, command.risk_category, "INVALID_CATEGORY", "risk category")
        if parsed_category.is_err():
            return Return.err(parsed_category.error)

        parsed_source = parse_choice(RiskSource, command.risk_source, "INVALID_SOURCE", "risk source")
        if parsed_source.is_err():
            return Return.err(parsed_source.error)

        status = INITIAL_STATUS
        if command.status is not None:
            parsed_status = parse_choice(RiskStatus, command.status, "INVALID_STATUS", "risk status")
            if parsed_status.is_err():
                return Return.err(parsed_status.error)
            status = parsed_status.value

        now = utcnow()

        async with self.uow:
            risk_id = await self.uow.sequences.next_id(IdentifierKind.risk, current_period(now))

            risk = Risk(
                risk_id=risk_id,
                identified_by=actor.user_id,
                identification_date=now,
                risk_category=parsed_category.value,
                risk_description=command.risk_description,
                risk_source=parsed_source.value,
                risk_trigger=command.risk_trigger,
                status=status,
                created_at=now,
                updated_at=now,
            )
            risk = await self.uow.risks.create(risk)

            await self.uow.commit()

            logger.info(f"Risk {risk.risk_id} created by {actor.user_id}")
            return Return.ok(RiskResponse.from_entity(risk))
