import pytest

from riskengine.app.use_cases.risks import ListRisksUseCase
from riskengine.domain.actor import Actor
from riskengine.domain.entities import RiskCategory, RiskStatus


@pytest.mark.asyncio
async def test_list_risks_passes_parsed_filters(mock_uow, viewer, make_risk):
    risk = make_risk(RiskStatus.in_mitigation, risk_category=RiskCategory.financial)
    mock_uow.risks.get_filtered.return_value = [risk]

    result = await ListRisksUseCase(mock_uow).execute(
        viewer, category="Financial", status="In Mitigation", search="budget"
    )

    assert result.is_ok()
    assert [r.risk_id for r in result.value.risks] == [risk.risk_id]
    assert result.value.risks[0].status == "In Mitigation"
    mock_uow.risks.get_filtered.assert_called_once_with(
        category=RiskCategory.financial, status=RiskStatus.in_mitigation, search="budget"
    )
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_list_risks_without_filters(mock_uow, team_member):
    result = await ListRisksUseCase(mock_uow).execute(team_member, search="")

    assert result.is_ok()
    assert result.value.risks == []
    mock_uow.risks.get_filtered.assert_called_once_with(category=None, status=None, search=None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "filters, code",
    [
        ({"category": "Weather"}, "INVALID_CATEGORY"),
        ({"status": "Forgotten"}, "INVALID_STATUS"),
    ],
)
async def test_list_risks_rejects_unknown_labels(mock_uow, admin, filters, code):
    result = await ListRisksUseCase(mock_uow).execute(admin, **filters)

    assert result.is_err()
    assert result.error.code == code
    mock_uow.risks.get_filtered.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_role_cannot_list_risks(mock_uow, admin):
    auditor = Actor(user_id=admin.user_id, role="Auditor")

    result = await ListRisksUseCase(mock_uow).execute(auditor)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_PERMISSION"
    mock_uow.risks.get_filtered.assert_not_called()
