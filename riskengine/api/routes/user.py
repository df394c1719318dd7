from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from riskengine.api.error import raise_for_error
from riskengine.app.services.unit_of_work import UnitOfWork
from riskengine.app.use_cases.users import CreateUserCommand, CreateUserUseCase, UserResponse
from riskengine.depends import get_current_user, get_unit_of_work
from riskengine.domain.actor import Actor

router = APIRouter(prefix="/users", tags=["Users"])


class CreateUserRequest(BaseModel):
    """POST /users request payload"""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: str = Field(..., description="Admin, Risk Manager, Team Member or Viewer")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    current_user: Actor = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Provision a user. Requires the manage_users permission.

    Raises:
        - 400 Bad Request: invalid email, short password, unknown role
        - 403 Forbidden: role lacks manage_users
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    use_case = CreateUserUseCase(uow)
    result = await use_case.execute(current_user, CreateUserCommand(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value
