import base64
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from riskengine.app.repositories.risk_update_repository import IRiskUpdateRepository
from riskengine.domain.entities import RiskUpdate


def _encode_cursor(record: RiskUpdate) -> str:
    raw = f"{record.created_at.isoformat()}|{record.id}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("utf-8")


def _decode_cursor(cursor: str) -> Optional[Tuple[datetime, UUID]]:
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("utf-8")).decode("utf-8")
        timestamp, record_id = raw.split("|", 1)
        return datetime.fromisoformat(timestamp), UUID(record_id)
    except (ValueError, TypeError):
        return None


class RiskUpdateRepository(IRiskUpdateRepository):
    """RiskUpdate repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, risk_update: RiskUpdate) -> RiskUpdate:
        """Append a new audit record (immutable)"""
        self.session.add(risk_update)
        await self.session.flush()
        await self.session.refresh(risk_update)
        return risk_update

    async def get_by_risk_paginated(
        self, risk_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[RiskUpdate], Optional[str]]:
        """
        Get audit records for a risk with cursor-based pagination.

        Cursor format: base64 of "<created_at ISO>|<id>" of the last record returned.
        Records sharing a timestamp are ordered by id so none is skipped between pages.
        """
        stmt = select(RiskUpdate).where(RiskUpdate.risk_id == risk_id)

        position = _decode_cursor(cursor) if cursor else None
        if position:
            # Invalid cursors are ignored and the first page is returned
            cursor_timestamp, cursor_id = position
            stmt = stmt.where(
                or_(
                    col(RiskUpdate.created_at) < cursor_timestamp,
                    and_(
                        col(RiskUpdate.created_at) == cursor_timestamp,
                        col(RiskUpdate.id) < cursor_id,
                    ),
                )
            )

        # Newest first, one extra row tells whether another page exists
        stmt = stmt.order_by(col(RiskUpdate.created_at).desc(), col(RiskUpdate.id).desc()).limit(
            limit + 1
        )

        result = await self.session.exec(stmt)
        records = list(result.all())

        has_more = len(records) > limit
        if has_more:
            records = records[:limit]

        next_cursor = _encode_cursor(records[-1]) if has_more and records else None
        return records, next_cursor
