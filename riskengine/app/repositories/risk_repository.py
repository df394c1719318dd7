from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from riskengine.domain.entities import Risk, RiskCategory, RiskStatus


class IRiskRepository(ABC):
    """Risk repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, risk_id: UUID) -> Optional[Risk]:
        """Get risk by ID"""
        pass

    @abstractmethod
    async def get_by_id_for_update(self, risk_id: UUID) -> Optional[Risk]:
        """Get risk by ID and lock the row until the transaction ends"""
        pass

    @abstractmethod
    async def get_filtered(
        self,
        category: Optional[RiskCategory] = None,
        status: Optional[RiskStatus] = None,
        search: Optional[str] = None,
    ) -> List[Risk]:
        """
        Risks matching every given filter, newest first.

        search is a case-insensitive substring of risk_id or risk_description.
        """
        pass

    @abstractmethod
    async def create(self, risk: Risk) -> Risk:
        """Create a new risk"""
        pass

    @abstractmethod
    async def update(self, risk: Risk) -> Risk:
        """Update existing risk"""
        pass

    @abstractmethod
    async def delete(self, risk: Risk) -> None:
        """Delete a risk"""
        pass

    @abstractmethod
    async def mark_assigned_if_identified(self, risk_id: UUID) -> bool:
        """
        Move a risk from Identified to Assigned.

        Conditional update: only fires when the stored status is exactly Identified.

        Returns:
            True if the status changed, False if it was left as is
        """
        pass
