from typing import List, Optional
from uuid import UUID

from sqlmodel import col, delete, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from riskengine.app.repositories.assignment_repository import IAssignmentRepository
from riskengine.domain.base import utcnow
from riskengine.domain.entities import (
    Assignment,
    AssignmentStatus,
    PriorityLevel,
    TERMINAL_ASSIGNMENT_STATUSES,
)


class AssignmentRepository(IAssignmentRepository):
    """Assignment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, assignment_id: UUID) -> Optional[Assignment]:
        """Get assignment by ID"""
        stmt = select(Assignment).where(Assignment.id == assignment_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_risk_id(self, risk_id: UUID) -> List[Assignment]:
        """Get all assignments of a risk, newest first"""
        stmt = (
            select(Assignment)
            .where(Assignment.risk_id == risk_id)
            .order_by(col(Assignment.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_filtered(
        self,
        status: Optional[AssignmentStatus] = None,
        priority: Optional[PriorityLevel] = None,
        limit: Optional[int] = None,
    ) -> List[Assignment]:
        """List assignments, newest first"""
        stmt = select(Assignment)
        if status is not None:
            stmt = stmt.where(Assignment.assignment_status == status)
        if priority is not None:
            stmt = stmt.where(Assignment.priority_level == priority)
        stmt = stmt.order_by(col(Assignment.created_at).desc(), col(Assignment.id).desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_active_by_risk_id(self, risk_id: UUID) -> int:
        """Count non-terminal assignments of a risk"""
        stmt = (
            select(func.count())
            .select_from(Assignment)
            .where(
                Assignment.risk_id == risk_id,
                col(Assignment.assignment_status).not_in(list(TERMINAL_ASSIGNMENT_STATUSES)),
            )
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, assignment: Assignment) -> Assignment:
        """Create a new assignment"""
        self.session.add(assignment)
        await self.session.flush()
        await self.session.refresh(assignment)
        return assignment

    async def update(self, assignment: Assignment) -> Assignment:
        """Update existing assignment"""
        assignment.updated_at = utcnow()
        self.session.add(assignment)
        await self.session.flush()
        await self.session.refresh(assignment)
        return assignment

    async def delete(self, assignment: Assignment) -> None:
        """Delete an assignment"""
        await self.session.delete(assignment)
        await self.session.flush()

    async def delete_by_risk_id(self, risk_id: UUID) -> int:
        """Delete every assignment of a risk"""
        stmt = delete(Assignment).where(Assignment.risk_id == risk_id)
        result = await self.session.execute(stmt)
        return result.rowcount
