import asyncio
import logging
import sys
from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from riskengine.adapter.repositories.assignment_repository import AssignmentRepository
from riskengine.adapter.repositories.risk_repository import RiskRepository
from riskengine.adapter.repositories.risk_update_repository import RiskUpdateRepository
from riskengine.adapter.repositories.user_repository import UserRepository
from riskengine.adapter.services.sequence_allocator import SqlAlchemySequenceAllocator
from riskengine.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern

    Anything not committed when the block exits is rolled back. With a timeout the
    block runs under asyncio.timeout, so an expired deadline cancels the work, rolls
    it back and surfaces as TimeoutError.
    """

    def __init__(self, session: AsyncSession, timeout: Optional[float] = None):
        self.session = session
        self.timeout = timeout
        self._deadline = None

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.risks = RiskRepository(self.session)
        self.assignments = AssignmentRepository(self.session)
        self.risk_updates = RiskUpdateRepository(self.session)
        self.sequences = SqlAlchemySequenceAllocator(self.session)

        if self.timeout is not None:
            self._deadline = asyncio.timeout(self.timeout)
            await self._deadline.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None:
            logger.debug(f"Rolling back unit of work after {exc_type.__name__}")

        deadline, self._deadline = self._deadline, None
        try:
            await self.rollback()
        except BaseException:
            if deadline is not None:
                await deadline.__aexit__(*sys.exc_info())
            raise

        if deadline is not None:
            return await deadline.__aexit__(exc_type, exc, tb)
        return False

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
