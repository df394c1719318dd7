from uuid import uuid4

import pytest

from riskengine.app.use_cases.assignments import DeleteAssignmentUseCase
from riskengine.domain.entities import AssignmentStatus


@pytest.mark.asyncio
async def test_delete_active_assignment(mock_uow, admin, make_risk, make_assignment):
    assignment = make_assignment(make_risk(), AssignmentStatus.in_progress)
    mock_uow.assignments.get_by_id.return_value = assignment

    result = await DeleteAssignmentUseCase(mock_uow).execute(admin, assignment.id)

    assert result.is_ok()
    assert result.value.status == "deleted"
    mock_uow.assignments.delete.assert_called_once_with(assignment)
    mock_uow.risk_updates.create.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_missing_assignment(mock_uow, admin):
    mock_uow.assignments.get_by_id.return_value = None

    result = await DeleteAssignmentUseCase(mock_uow).execute(admin, uuid4())

    assert result.is_err()
    assert result.error.code == "ASSIGNMENT_NOT_FOUND"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("role_fixture", ["risk_manager", "team_member", "viewer"])
async def test_only_admin_deletes_assignments(mock_uow, request, role_fixture):
    actor = request.getfixturevalue(role_fixture)

    result = await DeleteAssignmentUseCase(mock_uow).execute(actor, uuid4())

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_PERMISSION"
