"""
Input Validation

Field rules shared by the risk and assignment use cases. Every check runs before a
unit of work is opened, so a rejected request never touches storage.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Type, TypeVar

from riskengine.libs.result import Error, Result, Return

from .errors import validation_error

E = TypeVar("E", bound=Enum)

DESCRIPTION_MIN_LENGTH = 20
DESCRIPTION_MAX_LENGTH = 1000


def validate_risk_description(description: Optional[str]) -> Optional[Error]:
    if not description:
        return validation_error("INVALID_DESCRIPTION", "Risk description is required")

    if len(description) < DESCRIPTION_MIN_LENGTH or len(description) > DESCRIPTION_MAX_LENGTH:
        return validation_error(
            "INVALID_DESCRIPTION",
            f"Risk description must be between {DESCRIPTION_MIN_LENGTH} "
            f"and {DESCRIPTION_MAX_LENGTH} characters",
        )
    return None


def parse_choice(enum_cls: Type[E], value: str, code: str, label: str) -> Result[E]:
    """Convert a user-facing label into its enum member."""
    try:
        return Return.ok(enum_cls(value))
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        return Return.err(
            validation_error(code, f"Invalid {label}: {value}. Must be one of: {allowed}")
        )


def validate_deadline(deadline: datetime, now: datetime) -> Optional[Error]:
    """Deadline must be strictly later than now; both are naive UTC."""
    if deadline <= now:
        return validation_error("INVALID_DEADLINE", "Deadline must be in the future")
    return None
