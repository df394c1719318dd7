from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from riskengine.domain.entities import RiskUpdate


class IRiskUpdateRepository(ABC):
    """RiskUpdate repository interface - application layer

    Append-only: exposes no update or delete.
    """

    @abstractmethod
    async def create(self, risk_update: RiskUpdate) -> RiskUpdate:
        """Append a new audit record (immutable)"""
        pass

    @abstractmethod
    async def get_by_risk_paginated(
        self, risk_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[RiskUpdate], Optional[str]]:
        """
        Get audit records for a risk with cursor-based pagination.

        Returns:
            Tuple of (records list, next_cursor)
            - records: List of audit records ordered by created_at DESC
            - next_cursor: Cursor for next page, None if no more records
        """
        pass
