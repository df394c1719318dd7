from abc import ABC, abstractmethod

from riskengine.app.repositories.assignment_repository import IAssignmentRepository
from riskengine.app.repositories.risk_repository import IRiskRepository
from riskengine.app.repositories.risk_update_repository import IRiskUpdateRepository
from riskengine.app.repositories.user_repository import IUserRepository
from riskengine.app.services.sequence_allocator import ISequenceAllocator


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    risks: IRiskRepository
    assignments: IAssignmentRepository
    risk_updates: IRiskUpdateRepository
    sequences: ISequenceAllocator

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
