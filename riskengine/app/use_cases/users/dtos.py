"""
User Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime

from pydantic import BaseModel


class CreateUserCommand(BaseModel):
    name: str
    email: str
    password: str
    role: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    created_at: datetime
