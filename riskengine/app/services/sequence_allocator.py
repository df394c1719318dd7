from abc import ABC, abstractmethod
from typing import Union

from riskengine.domain.entities import IdentifierKind


class ISequenceAllocator(ABC):
    """
    Allocator of human-readable identifiers (KIND-YYYY-MM-NNNN) - application layer

    Both steps run inside the caller's unit of work, so an identifier is only
    consumed if the transaction that asked for it commits.
    """

    @abstractmethod
    async def count_existing(self, kind: Union[str, IdentifierKind], period: str) -> int:
        """Number of stored identifiers of a kind within a period"""
        pass

    @abstractmethod
    async def next_id(self, kind: Union[str, IdentifierKind], period: str) -> str:
        """
        Reserve the next identifier of a kind within a period.

        Two concurrent callers never receive the same identifier.
        """
        pass
