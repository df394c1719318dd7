import logging
from typing import Union

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import col, func, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from riskengine.app.services.sequence_allocator import ISequenceAllocator
from riskengine.domain.entities import Assignment, IdentifierKind, IdentifierSequence, Risk
from riskengine.domain.identifiers import format_identifier, identifier_prefix

logger = logging.getLogger(__name__)

_INSERT_BY_DIALECT = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}

SUPPORTED_DIALECTS = frozenset(_INSERT_BY_DIALECT)


class SqlAlchemySequenceAllocator(ISequenceAllocator):
    """
    Counter-row allocator.

    Each (kind, period) owns one row in identifier_sequences. Allocation is a single
    UPDATE ... SET last_value = last_value + 1, which holds the row's write lock until
    the enclosing transaction ends, so concurrent allocations for the same period
    queue behind each other instead of reading the same count. The first allocation
    of a period seeds the row from the identifiers already stored for it.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_existing(self, kind: Union[str, IdentifierKind], period: str) -> int:
        """Count identifiers of a kind already stored for a period"""
        kind = IdentifierKind(kind)
        column = col(Risk.risk_id) if kind == IdentifierKind.risk else col(Assignment.assignment_id)
        stmt = select(func.count()).where(column.like(f"{identifier_prefix(kind, period)}%"))
        result = await self.session.exec(stmt)
        return result.one()

    async def next_id(self, kind: Union[str, IdentifierKind], period: str) -> str:
        """Reserve the next identifier inside the current transaction"""
        kind = IdentifierKind(kind)

        if not await self._increment(kind, period):
            await self._seed(kind, period)
            await self._increment(kind, period)

        stmt = select(IdentifierSequence.last_value).where(
            IdentifierSequence.kind == kind.value, IdentifierSequence.period == period
        )
        result = await self.session.exec(stmt)
        identifier = format_identifier(kind, period, result.one())

        logger.debug(f"Allocated identifier {identifier}")
        return identifier

    async def _increment(self, kind: IdentifierKind, period: str) -> bool:
        stmt = (
            update(IdentifierSequence)
            .where(IdentifierSequence.kind == kind.value, IdentifierSequence.period == period)
            .values(last_value=IdentifierSequence.last_value + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def _seed(self, kind: IdentifierKind, period: str) -> None:
        existing = await self.count_existing(kind, period)

        # Database refuses any backend outside SUPPORTED_DIALECTS
        insert = _INSERT_BY_DIALECT[self.session.bind.dialect.name]

        # A concurrent seeder may win; its row is then incremented instead of ours
        stmt = (
            insert(IdentifierSequence)
            .values(kind=kind.value, period=period, last_value=existing)
            .on_conflict_do_nothing(index_elements=["kind", "period"])
        )
        await self.session.execute(stmt)
        logger.info(f"Started {kind.value} sequence for {period} after {existing} existing")
