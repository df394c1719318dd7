from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from riskengine.adapter.services.database import Database
from riskengine.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from riskengine.api.error import ClientError
from riskengine.api.utils.jwt import verify_jwt
from riskengine.config import ApplicationConfig
from riskengine.domain.actor import Actor
from riskengine.domain.errors import ErrorKind
from riskengine.libs.result import Error

security = HTTPBearer(auto_error=False)


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_unit_of_work(
    database: Database = Depends(get_database),
    x_request_timeout: Optional[float] = Header(None),
):
    """
    One session per request, closed on every exit path.

    X-Request-Timeout (seconds) lets the caller shorten the deadline for the
    request's transaction.
    """
    timeout = ApplicationConfig.REQUEST_TIMEOUT_SECONDS
    if x_request_timeout is not None and x_request_timeout > 0:
        timeout = min(timeout, x_request_timeout)

    async with database.session() as session:
        yield SqlAlchemyUnitOfWork(session, timeout=timeout)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Actor:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Actor with the user_id and role claims of the token

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("NOT_AUTHENTICATED", "Not authenticated", ErrorKind.authentication.value),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    claims = verify_jwt(credentials.credentials)
    try:
        user_id = UUID(claims["user_id"]) if claims else None
    except (AttributeError, TypeError, ValueError):
        user_id = None

    if user_id is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token", ErrorKind.authentication.value),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return Actor(user_id=user_id, role=claims["role"])
