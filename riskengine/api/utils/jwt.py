from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from riskengine.config import ApplicationConfig

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ("user_id", "role")


def generate_jwt(user_id: UUID, role: str, expires_delta: timedelta = timedelta(minutes=15)) -> str:
    """
    Issue a signed access token for a user.

    Login is handled by the identity provider in front of the engine; this helper
    serves local tooling and the test suite.

    Args:
        user_id: User UUID
        role: Role label (Admin, Risk Manager, Team Member, Viewer)
        expires_delta: Lifetime of the token

    Returns:
        JWT token string
    """
    issued_at = datetime.now(UTC)
    claims = {
        "user_id": str(user_id),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(claims, ApplicationConfig.JWT_SECRET, algorithm=ALGORITHM)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Decode a bearer token.

    Returns the claims, or None when the signature, expiry or required claims
    (user_id, role) do not check out.
    """
    try:
        claims = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ALGORITHM],
            options={"require_exp": True},
        )
    except JWTError:
        return None

    if any(not claims.get(name) for name in REQUIRED_CLAIMS):
        return None
    return claims
