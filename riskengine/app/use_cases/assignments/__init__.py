"""
Assignment Use Cases

Creating, reading, editing and deleting assignments, including the risk status
side effect of assignment creation.
"""

from .dtos import (
    AssignmentListResponse,
    AssignmentResponse,
    CreateAssignmentCommand,
    DeleteAssignmentResponse,
    UpdateAssignmentCommand,
)
from .create_assignment_use_case import CreateAssignmentUseCase
from .update_assignment_use_case import UpdateAssignmentUseCase
from .delete_assignment_use_case import DeleteAssignmentUseCase
from .get_assignment_use_case import GetAssignmentUseCase
from .list_assignments_use_case import ListAssignmentsUseCase

__all__ = [
    "AssignmentListResponse",
    "AssignmentResponse",
    "CreateAssignmentCommand",
    "DeleteAssignmentResponse",
    "UpdateAssignmentCommand",
    "CreateAssignmentUseCase",
    "UpdateAssignmentUseCase",
    "DeleteAssignmentUseCase",
    "GetAssignmentUseCase",
    "ListAssignmentsUseCase",
]
