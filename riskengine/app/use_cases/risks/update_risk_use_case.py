"""
Update Risk Use Case

Coalesce-style partial update of a risk; status changes land on the timeline.
"""

import logging
from uuid import UUID

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.entities import RiskCategory, RiskSource, RiskStatus, RiskUpdate, UpdateType
from riskengine.domain.errors import insufficient_permission, risk_not_found
from riskengine.domain.lifecycle import status_change
from riskengine.domain.permissions import Action, authorize
from riskengine.domain.validation import parse_choice, validate_risk_description
from riskengine.libs.result import Result, Return

from .dtos import RiskResponse, UpdateRiskCommand

logger = logging.getLogger(__name__)


class UpdateRiskUseCase:
    """
    Use case for editing a risk.

    Business Rules:
    - Caller role must allow update_risk
    - Omitted fields keep their stored value
    - Supplied fields are validated as on creation
    - Any enumerated status may be written, no transition table applies
    - A status that differs from the stored one appends exactly one
      "Status Change" record in the same transaction; other edits append nothing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Actor, risk_id: UUID, command: UpdateRiskCommand
    ) -> Result[RiskResponse]:
        if not authorize(actor.role, Action.update_risk):
            return Return.err(insufficient_permission(Action.update_risk.value))

        if command.risk_description is not None:
            description_error = validate_risk_description(command.risk_description)
            if description_error:
                return Return.err(description_error)

        category = source = status = None
        if command.risk_category is not None:
            parsed = parse_choice(RiskCategory, command.risk_category, "INVALID_CATEGORY", "risk category")
            if parsed.is_err():
                return Return.err(parsed.error)
            category = parsed.value

        if command.risk_source is not None:
            parsed = parse_choice(RiskSource, command.risk_source, "INVALID_SOURCE", "risk source")
            if parsed.is_err():
                return Return.err(parsed.error)
            source = parsed.value

        if command.status is not None:
            parsed = parse_choice(RiskStatus, command.status, "INVALID_STATUS", "risk status")
            if parsed.is_err():
                return Return.err(parsed.error)
            status = parsed.value

        async with self.uow:
            risk = await self.uow.risks.get_by_id_for_update(risk_id)
            if risk is None:
                return Return.err(risk_not_found())

            change = status_change(risk.status, status)

            if category is not None:
                risk.risk_category = category
            if command.risk_description is not None:
                risk.risk_description = command.risk_description
            if source is not None:
                risk.risk_source = source
            if command.risk_trigger is not None:
                risk.risk_trigger = command.risk_trigger
            if status is not None:
                risk.status = status

            risk = await self.uow.risks.update(risk)

            if change:
                await self.uow.risk_updates.create(
                    RiskUpdate(
                        risk_id=risk.id,
                        updated_by=actor.user_id,
                        update_type=UpdateType.STATUS_CHANGE,
                        previous_value=change.previous,
                        new_value=change.new,
                    )
                )

            await self.uow.commit()

            if change:
                logger.info(f"Risk {risk.risk_id} status {change.previous} -> {change.new}")
            return Return.ok(RiskResponse.from_entity(risk))
