from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from riskengine.domain.entities import User


class IUserRepository(ABC):
    """Read access for assignee checks plus user provisioning"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Lookup ignores letter case"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        pass
