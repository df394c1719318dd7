from uuid import uuid4

import pytest

from riskengine.app.use_cases.audit import (
    GetRiskUpdatesUseCase,
    LogRiskUpdateCommand,
    LogRiskUpdateUseCase,
)
from riskengine.domain.entities import RiskUpdate, UpdateType


@pytest.mark.asyncio
async def test_get_risk_updates_passes_pagination(mock_uow, viewer):
    risk_id = uuid4()
    records = [
        RiskUpdate(
            risk_id=risk_id,
            updated_by=uuid4(),
            update_type=UpdateType.STATUS_CHANGE,
            previous_value="Identified",
            new_value="Assigned",
        )
    ]
    mock_uow.risk_updates.get_by_risk_paginated.return_value = (records, "next-page")

    result = await GetRiskUpdatesUseCase(mock_uow).execute(viewer, risk_id, limit=10, cursor="abc")

    assert result.is_ok()
    page = result.value
    assert page.next_cursor == "next-page"
    assert len(page.updates) == 1
    assert page.updates[0].update_type == "Status Change"
    assert page.updates[0].risk_id == str(risk_id)
    mock_uow.risk_updates.get_by_risk_paginated.assert_called_once_with(
        risk_id, limit=10, cursor="abc"
    )
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_get_risk_updates_does_not_require_risk(mock_uow, admin):
    mock_uow.risks.get_by_id.return_value = None

    result = await GetRiskUpdatesUseCase(mock_uow).execute(admin, uuid4())

    assert result.is_ok()
    assert result.value.updates == []
    assert result.value.next_cursor is None
    mock_uow.risks.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_log_risk_update(mock_uow, risk_manager, make_risk):
    risk = make_risk()
    mock_uow.risks.get_by_id.return_value = risk

    result = await LogRiskUpdateUseCase(mock_uow).execute(
        risk_manager,
        risk.id,
        LogRiskUpdateCommand(update_type="Progress Note", comment="Vendor contacted"),
    )

    assert result.is_ok()
    assert result.value.update_type == "Progress Note"
    assert result.value.comment == "Vendor contacted"
    assert result.value.updated_by == str(risk_manager.user_id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_log_risk_update_on_missing_risk(mock_uow, admin):
    mock_uow.risks.get_by_id.return_value = None

    result = await LogRiskUpdateUseCase(mock_uow).execute(
        admin, uuid4(), LogRiskUpdateCommand(update_type="Progress Note")
    )

    assert result.is_err()
    assert result.error.code == "RISK_NOT_FOUND"
    mock_uow.risk_updates.create.assert_not_called()


@pytest.mark.asyncio
async def test_team_member_cannot_log_updates(mock_uow, team_member):
    result = await LogRiskUpdateUseCase(mock_uow).execute(
        team_member, uuid4(), LogRiskUpdateCommand(update_type="Progress Note")
    )

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_PERMISSION"
