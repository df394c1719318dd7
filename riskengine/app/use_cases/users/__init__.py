"""
User Management Use Cases
"""

from .dtos import CreateUserCommand, UserResponse
from .create_user_use_case import CreateUserUseCase

__all__ = [
    "CreateUserCommand",
    "UserResponse",
    "CreateUserUseCase",
]
