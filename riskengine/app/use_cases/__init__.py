"""
Use Cases

Organized by domain folder:
- risks/: Risk lifecycle
- assignments/: Assignment coordination
- audit/: Risk activity timeline
- users/: User provisioning
"""

from .risks import (
    CreateRiskUseCase,
    DeleteRiskUseCase,
    GetRiskUseCase,
    ListRisksUseCase,
    UpdateRiskUseCase,
)
from .assignments import (
    CreateAssignmentUseCase,
    DeleteAssignmentUseCase,
    GetAssignmentUseCase,
    ListAssignmentsUseCase,
    UpdateAssignmentUseCase,
)
from .audit import (
    GetRiskUpdatesUseCase,
    LogRiskUpdateUseCase,
)
from .users import (
    CreateUserUseCase,
)

__all__ = [
    # Risks
    "CreateRiskUseCase",
    "DeleteRiskUseCase",
    "GetRiskUseCase",
    "ListRisksUseCase",
    "UpdateRiskUseCase",
    # Assignments
    "CreateAssignmentUseCase",
    "DeleteAssignmentUseCase",
    "GetAssignmentUseCase",
    "ListAssignmentsUseCase",
    "UpdateAssignmentUseCase",
    # Audit
    "GetRiskUpdatesUseCase",
    "LogRiskUpdateUseCase",
    # Users
    "CreateUserUseCase",
]
