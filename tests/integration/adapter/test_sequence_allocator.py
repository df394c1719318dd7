import pytest

from riskengine.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from riskengine.domain.base import utcnow
from riskengine.domain.entities import (
    IdentifierKind,
    Risk,
    RiskCategory,
    RiskSource,
    RiskStatus,
    UserRole,
)


async def _next_id(database, kind, period, commit=True):
    async with database.session() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            identifier = await uow.sequences.next_id(kind, period)
            if commit:
                await uow.commit()
            return identifier


@pytest.mark.asyncio
async def test_numbering_starts_at_one_per_period(database):
    assert await _next_id(database, IdentifierKind.risk, "2024-05") == "RISK-2024-05-0001"
    assert await _next_id(database, IdentifierKind.risk, "2024-05") == "RISK-2024-05-0002"
    assert await _next_id(database, IdentifierKind.risk, "2024-06") == "RISK-2024-06-0001"


@pytest.mark.asyncio
async def test_kinds_are_numbered_independently(database):
    assert await _next_id(database, IdentifierKind.risk, "2024-05") == "RISK-2024-05-0001"
    assert await _next_id(database, IdentifierKind.assignment, "2024-05") == "ASGN-2024-05-0001"
    assert await _next_id(database, "ASGN", "2024-05") == "ASGN-2024-05-0002"


@pytest.mark.asyncio
async def test_rolled_back_allocation_is_reused(database):
    first = await _next_id(database, IdentifierKind.assignment, "2024-07", commit=False)
    second = await _next_id(database, IdentifierKind.assignment, "2024-07")

    assert first == second == "ASGN-2024-07-0001"


@pytest.mark.asyncio
async def test_sequence_continues_after_existing_identifiers(database, make_user):
    user, _ = await make_user(UserRole.admin)
    now = utcnow()
    async with database.session() as session:
        for n in range(1, 4):
            session.add(
                Risk(
                    risk_id=f"RISK-2023-11-{n:04d}",
                    identified_by=user.id,
                    identification_date=now,
                    risk_category=RiskCategory.operational,
                    risk_description="Legacy risk imported before sequences existed",
                    risk_source=RiskSource.project_review,
                    status=RiskStatus.closed,
                )
            )
        await session.commit()

    async with database.session() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            assert await uow.sequences.count_existing(IdentifierKind.risk, "2023-11") == 3
            assert await uow.sequences.count_existing(IdentifierKind.risk, "2023-12") == 0

    assert await _next_id(database, IdentifierKind.risk, "2023-11") == "RISK-2023-11-0004"
