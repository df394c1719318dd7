from typing import List, Optional
from uuid import UUID

from sqlmodel import col, or_, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from riskengine.app.repositories.risk_repository import IRiskRepository
from riskengine.domain.base import utcnow
from riskengine.domain.entities import Risk, RiskCategory, RiskStatus
from riskengine.domain.lifecycle import AUTO_ASSIGN_FROM, AUTO_ASSIGN_TO


class RiskRepository(IRiskRepository):
    """Risk repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, risk_id: UUID) -> Optional[Risk]:
        """Get risk by ID"""
        stmt = select(Risk).where(Risk.id == risk_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id_for_update(self, risk_id: UUID) -> Optional[Risk]:
        """Get risk by ID with a row lock (SQLite transactions already hold the database lock)"""
        stmt = select(Risk).where(Risk.id == risk_id).with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_filtered(
        self,
        category: Optional[RiskCategory] = None,
        status: Optional[RiskStatus] = None,
        search: Optional[str] = None,
    ) -> List[Risk]:
        """List risks, newest first"""
        stmt = select(Risk)
        if category is not None:
            stmt = stmt.where(Risk.risk_category == category)
        if status is not None:
            stmt = stmt.where(Risk.status == status)
        if search:
            stmt = stmt.where(
                or_(
                    col(Risk.risk_id).icontains(search, autoescape=True),
                    col(Risk.risk_description).icontains(search, autoescape=True),
                )
            )
        stmt = stmt.order_by(col(Risk.created_at).desc(), col(Risk.id).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, risk: Risk) -> Risk:
        """Create a new risk"""
        self.session.add(risk)
        await self.session.flush()
        await self.session.refresh(risk)
        return risk

    async def update(self, risk: Risk) -> Risk:
        """Update existing risk"""
        risk.updated_at = utcnow()
        self.session.add(risk)
        await self.session.flush()
        await self.session.refresh(risk)
        return risk

    async def delete(self, risk: Risk) -> None:
        """Delete a risk"""
        await self.session.delete(risk)
        await self.session.flush()

    async def mark_assigned_if_identified(self, risk_id: UUID) -> bool:
        """Conditional Identified -> Assigned update, a no-op for any other status"""
        stmt = (
            update(Risk)
            .where(Risk.id == risk_id, Risk.status == AUTO_ASSIGN_FROM)
            .values(status=AUTO_ASSIGN_TO, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
