from uuid import uuid4

import pytest

from riskengine.app.use_cases.risks import DeleteRiskUseCase
from riskengine.domain.entities import RiskStatus


@pytest.mark.asyncio
async def test_delete_risk_without_active_assignments(mock_uow, admin, make_risk):
    risk = make_risk(RiskStatus.closed)
    mock_uow.risks.get_by_id_for_update.return_value = risk
    mock_uow.assignments.count_active_by_risk_id.return_value = 0

    result = await DeleteRiskUseCase(mock_uow).execute(admin, risk.id)

    assert result.is_ok()
    assert result.value.status == "deleted"
    mock_uow.assignments.delete_by_risk_id.assert_called_once_with(risk.id)
    mock_uow.risks.delete.assert_called_once_with(risk)
    mock_uow.risk_updates.create.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_active_assignments_block_deletion(mock_uow, admin, make_risk):
    risk = make_risk(RiskStatus.assigned)
    mock_uow.risks.get_by_id_for_update.return_value = risk
    mock_uow.assignments.count_active_by_risk_id.return_value = 2

    result = await DeleteRiskUseCase(mock_uow).execute(admin, risk.id)

    assert result.is_err()
    assert result.error.code == "RISK_HAS_ACTIVE_ASSIGNMENTS"
    assert result.error.kind == "conflict"
    mock_uow.risks.delete.assert_not_called()
    mock_uow.assignments.delete_by_risk_id.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_missing_risk(mock_uow, admin):
    mock_uow.risks.get_by_id_for_update.return_value = None

    result = await DeleteRiskUseCase(mock_uow).execute(admin, uuid4())

    assert result.is_err()
    assert result.error.code == "RISK_NOT_FOUND"


@pytest.mark.asyncio
async def test_risk_manager_cannot_delete(mock_uow, risk_manager):
    result = await DeleteRiskUseCase(mock_uow).execute(risk_manager, uuid4())

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_PERMISSION"
    mock_uow.risks.get_by_id_for_update.assert_not_called()
