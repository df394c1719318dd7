"""
User Entity

Represents a person who identifies risks, assigns them or works on them.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from riskengine.domain.base import utcnow

from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - inert reference from risks, assignments and audit records.

    Business Rules:
    - Email must be unique across all users
    - Role is the sole authorization axis
    - Password stored as bcrypt hash (cost factor 12)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    role: UserRole = Field(default=UserRole.viewer)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
