from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from riskengine.domain.entities import Assignment, AssignmentStatus, PriorityLevel


class IAssignmentRepository(ABC):
    """Assignment repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, assignment_id: UUID) -> Optional[Assignment]:
        """Get assignment by ID"""
        pass

    @abstractmethod
    async def get_by_risk_id(self, risk_id: UUID) -> List[Assignment]:
        """Get all assignments of a risk, newest first"""
        pass

    @abstractmethod
    async def get_filtered(
        self,
        status: Optional[AssignmentStatus] = None,
        priority: Optional[PriorityLevel] = None,
        limit: Optional[int] = None,
    ) -> List[Assignment]:
        """Assignments matching every given filter, newest first"""
        pass

    @abstractmethod
    async def count_active_by_risk_id(self, risk_id: UUID) -> int:
        """Count assignments of a risk that are neither Completed nor Cancelled"""
        pass

    @abstractmethod
    async def create(self, assignment: Assignment) -> Assignment:
        """Create a new assignment"""
        pass

    @abstractmethod
    async def update(self, assignment: Assignment) -> Assignment:
        """Update existing assignment"""
        pass

    @abstractmethod
    async def delete(self, assignment: Assignment) -> None:
        """Delete an assignment"""
        pass

    @abstractmethod
    async def delete_by_risk_id(self, risk_id: UUID) -> int:
        """Delete every assignment of a risk, returns the number removed"""
        pass
