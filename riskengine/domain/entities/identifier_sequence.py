"""
IdentifierSequence Entity

Per-kind, per-month counter behind human-readable identifiers.
"""

from sqlmodel import Field, SQLModel


class IdentifierSequence(SQLModel, table=True):
    """
    IdentifierSequence entity - last sequence number handed out for a (kind, period).

    Business Rules:
    - One row per (kind, period), e.g. ("RISK", "2024-05")
    - last_value only ever grows, incremented under the row's write lock
    - Seeded from the count of identifiers already stored for the period
    """

    __tablename__ = "identifier_sequences"

    kind: str = Field(primary_key=True, max_length=8)
    period: str = Field(primary_key=True, max_length=7)
    last_value: int = Field(default=0, nullable=False)
