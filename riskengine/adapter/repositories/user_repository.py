from typing import Optional
from uuid import UUID

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from riskengine.app.repositories.user_repository import IUserRepository
from riskengine.domain.entities import User


class UserRepository(IUserRepository):
    """Users are referenced by risks and assignments; only provisioning writes them"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        result = await self.session.exec(select(User).where(User.id == user_id))
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup, so rows written before normalisation still collide"""
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, user: User) -> User:
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
