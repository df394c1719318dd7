"""
Human-Readable Identifiers

Format helpers for KIND-YYYY-MM-NNNN identifiers. Numbering restarts every month.
"""

from datetime import datetime
from typing import Union

from .entities.enums import IdentifierKind

SEQUENCE_WIDTH = 4


def current_period(now: datetime) -> str:
    """Period label (YYYY-MM) for a point in time."""
    return f"{now.year:04d}-{now.month:02d}"


def identifier_prefix(kind: Union[str, IdentifierKind], period: str) -> str:
    """Prefix shared by every identifier of a kind within a period, e.g. RISK-2024-05-"""
    return f"{IdentifierKind(kind).value}-{period}-"


def format_identifier(kind: Union[str, IdentifierKind], period: str, sequence: int) -> str:
    if sequence < 1:
        raise ValueError(f"Sequence numbers start at 1, got {sequence}")
    return f"{identifier_prefix(kind, period)}{sequence:0{SEQUENCE_WIDTH}d}"
