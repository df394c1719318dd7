"""
Role Permissions

Static role -> allowed actions table. Pure data, built once at import.
"""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Union

from .entities.enums import UserRole


class Action(str, Enum):
    """Closed set of actions a role may be granted"""

    view_dashboard = "view_dashboard"
    view_risks = "view_risks"
    create_risk = "create_risk"
    update_risk = "update_risk"
    delete_risk = "delete_risk"
    view_assignments = "view_assignments"
    create_assignment = "assign_risk"
    update_assignment = "update_assignment"
    delete_assignment = "delete_assignment"
    view_reports = "view_reports"
    view_profile = "view_profile"
    manage_users = "manage_users"


ROLE_PERMISSIONS: Mapping[str, FrozenSet[Action]] = MappingProxyType(
    {
        UserRole.admin.value: frozenset(Action),
        UserRole.risk_manager.value: frozenset(
            {
                Action.view_dashboard,
                Action.view_risks,
                Action.create_risk,
                Action.update_risk,
                Action.view_assignments,
                Action.create_assignment,
                Action.update_assignment,
                Action.view_reports,
                Action.view_profile,
            }
        ),
        UserRole.team_member.value: frozenset(
            {
                Action.view_dashboard,
                Action.view_risks,
                Action.create_risk,
                Action.view_assignments,
                Action.update_assignment,
                Action.view_profile,
            }
        ),
        UserRole.viewer.value: frozenset(
            {
                Action.view_dashboard,
                Action.view_risks,
                Action.view_assignments,
                Action.view_reports,
                Action.view_profile,
            }
        ),
    }
)


def _role_key(role: Union[str, UserRole, None]) -> Optional[str]:
    if isinstance(role, UserRole):
        return role.value
    return role


def permissions_for(role: Union[str, UserRole, None]) -> FrozenSet[Action]:
    """All actions granted to a role; empty for unknown roles."""
    return ROLE_PERMISSIONS.get(_role_key(role), frozenset())


def authorize(role: Union[str, UserRole, None], action: Union[str, Action, None]) -> bool:
    """
    Decide whether a role may perform an action.

    Unknown roles and unknown actions are denied.
    """
    if not role or not action:
        return False

    try:
        action = Action(action)
    except ValueError:
        return False

    return action in permissions_for(role)
