"""
Risk Engine Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AssignmentStatus,
    IdentifierKind,
    PriorityLevel,
    RiskCategory,
    RiskSource,
    RiskStatus,
    TERMINAL_ASSIGNMENT_STATUSES,
    UpdateType,
    UserRole,
)

# Export all entities
from .user import User
from .risk import Risk
from .assignment import Assignment
from .risk_update import RiskUpdate
from .identifier_sequence import IdentifierSequence

__all__ = [
    # Enums
    "AssignmentStatus",
    "IdentifierKind",
    "PriorityLevel",
    "RiskCategory",
    "RiskSource",
    "RiskStatus",
    "TERMINAL_ASSIGNMENT_STATUSES",
    "UpdateType",
    "UserRole",
    # Entities
    "User",
    "Risk",
    "Assignment",
    "RiskUpdate",
    "IdentifierSequence",
]
