"""
Create User Use Case

Provisions a user that risks and assignments can reference.
"""

import logging

import bcrypt

from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.domain.actor import Actor
from riskengine.domain.entities import User, UserRole
from riskengine.domain.errors import conflict_error, insufficient_permission
from riskengine.domain.permissions import Action, authorize
from riskengine.domain.validation import parse_choice
from riskengine.libs.result import Result, Return

from .dtos import CreateUserCommand, UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for adding a user.

    Business Rules:
    - Caller role must allow manage_users
    - Email must be unique
    - Role from Admin/Risk Manager/Team Member/Viewer
    - Password stored as bcrypt hash (cost factor 12)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Actor, command: CreateUserCommand) -> Result[UserResponse]:
        if not authorize(actor.role, Action.manage_users):
            return Return.err(insufficient_permission(Action.manage_users.value))

        role = parse_choice(UserRole, command.role, "INVALID_ROLE", "role")
        if role.is_err():
            return Return.err(role.error)

        email = command.email.strip().lower()

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(
                    conflict_error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(command.password.encode("utf-8"), bcrypt.gensalt(12))

            user = User(
                name=command.name,
                email=email,
                role=role.value,
                password_hash=password_hash.decode("utf-8"),
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

            logger.info(f"User {user.id} created with role {user.role.value}")
            return Return.ok(
                UserResponse(
                    id=str(user.id),
                    name=user.name,
                    email=user.email,
                    role=user.role.value,
                    created_at=user.created_at,
                )
            )
