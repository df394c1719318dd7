"""
Actor

The authenticated caller on whose behalf a use case runs.
"""

from uuid import UUID

from pydantic import BaseModel


class Actor(BaseModel):
    """Identity and role taken from a verified access token"""

    user_id: UUID
    role: str
