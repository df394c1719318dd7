from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from riskengine.domain.actor import Actor
from riskengine.domain.base import utcnow
from riskengine.domain.entities import (
    Assignment,
    AssignmentStatus,
    PriorityLevel,
    Risk,
    RiskCategory,
    RiskSource,
    RiskStatus,
    UserRole,
)


def _returns_argument(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.create = AsyncMock(side_effect=_returns_argument)

    uow.risks = MagicMock()
    uow.risks.get_by_id = AsyncMock()
    uow.risks.get_by_id_for_update = AsyncMock()
    uow.risks.get_filtered = AsyncMock(return_value=[])
    uow.risks.create = AsyncMock(side_effect=_returns_argument)
    uow.risks.update = AsyncMock(side_effect=_returns_argument)
    uow.risks.delete = AsyncMock()
    uow.risks.mark_assigned_if_identified = AsyncMock(return_value=True)

    uow.assignments = MagicMock()
    uow.assignments.get_by_id = AsyncMock()
    uow.assignments.get_by_risk_id = AsyncMock(return_value=[])
    uow.assignments.get_filtered = AsyncMock(return_value=[])
    uow.assignments.count_active_by_risk_id = AsyncMock(return_value=0)
    uow.assignments.create = AsyncMock(side_effect=_returns_argument)
    uow.assignments.update = AsyncMock(side_effect=_returns_argument)
    uow.assignments.delete = AsyncMock()
    uow.assignments.delete_by_risk_id = AsyncMock(return_value=0)

    uow.risk_updates = MagicMock()
    uow.risk_updates.create = AsyncMock(side_effect=_returns_argument)
    uow.risk_updates.get_by_risk_paginated = AsyncMock(return_value=([], None))

    uow.sequences = MagicMock()
    uow.sequences.next_id = AsyncMock(return_value="RISK-2024-05-0001")
    uow.sequences.count_existing = AsyncMock(return_value=0)

    return uow


@pytest.fixture
def admin():
    return Actor(user_id=uuid4(), role=UserRole.admin.value)


@pytest.fixture
def risk_manager():
    return Actor(user_id=uuid4(), role=UserRole.risk_manager.value)


@pytest.fixture
def team_member():
    return Actor(user_id=uuid4(), role=UserRole.team_member.value)


@pytest.fixture
def viewer():
    return Actor(user_id=uuid4(), role=UserRole.viewer.value)


@pytest.fixture
def make_risk():
    def _make(status: RiskStatus = RiskStatus.identified, **overrides) -> Risk:
        now = utcnow()
        fields = dict(
            id=uuid4(),
            risk_id="RISK-2024-05-0001",
            identified_by=uuid4(),
            identification_date=now,
            risk_category=RiskCategory.security,
            risk_description="Unpatched servers exposed to the internet",
            risk_source=RiskSource.internal_audit,
            status=status,
            created_at=now,
            updated_at=now,
        )
        fields.update(overrides)
        return Risk(**fields)

    return _make


@pytest.fixture
def make_assignment():
    def _make(
        risk: Risk, status: AssignmentStatus = AssignmentStatus.pending, **overrides
    ) -> Assignment:
        now = utcnow()
        fields = dict(
            id=uuid4(),
            assignment_id="ASGN-2024-05-0001",
            risk_id=risk.id,
            assigned_to=uuid4(),
            assigned_by=uuid4(),
            assignment_date=now,
            assignment_status=status,
            priority_level=PriorityLevel.high,
            deadline_date=now + timedelta(days=7),
            created_at=now,
            updated_at=now,
        )
        fields.update(overrides)
        return Assignment(**fields)

    return _make
