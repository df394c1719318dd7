"""
Risk Engine Error Catalogue

Every expected failure carries a stable code and one of a fixed set of kinds.
The API layer maps kinds to HTTP status codes.
"""

from enum import Enum

from riskengine.libs.result import Error


class ErrorKind(str, Enum):
    """Failure category visible to clients"""

    validation = "validation"
    authentication = "authentication"
    authorization = "authorization"
    not_found = "not_found"
    conflict = "conflict"
    storage = "storage"


def validation_error(code: str, message: str) -> Error:
    return Error(code, message, ErrorKind.validation.value)


def not_found_error(code: str, message: str) -> Error:
    return Error(code, message, ErrorKind.not_found.value)


def conflict_error(code: str, message: str) -> Error:
    return Error(code, message, ErrorKind.conflict.value)


def insufficient_permission(action: str) -> Error:
    return Error(
        "INSUFFICIENT_PERMISSION",
        f"Your role is not allowed to perform '{action}'",
        ErrorKind.authorization.value,
    )


def risk_not_found() -> Error:
    return not_found_error("RISK_NOT_FOUND", "Risk not found")


def assignment_not_found() -> Error:
    return not_found_error("ASSIGNMENT_NOT_FOUND", "Assignment not found")
