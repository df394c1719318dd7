"""
Risk Lifecycle

Identified -> Assigned -> In Mitigation -> Resolved -> Closed.

The nominal path is not enforced: an authorized edit may write any enumerated status,
including moving backwards (e.g. Closed -> Identified). The only automatic transition is
Identified -> Assigned when a risk receives an assignment.
"""

from enum import Enum
from typing import NamedTuple, Optional

from .entities.enums import RiskStatus

INITIAL_STATUS = RiskStatus.identified

# Conditional transition fired by assignment creation
AUTO_ASSIGN_FROM = RiskStatus.identified
AUTO_ASSIGN_TO = RiskStatus.assigned


class StatusChange(NamedTuple):
    previous: str
    new: str


def status_change(current: Enum, requested: Optional[Enum]) -> Optional[StatusChange]:
    """
    Describe the transition from current to requested, or None when nothing changes.

    Works for risk and assignment statuses alike. None as requested means the caller
    did not supply a status.
    """
    if requested is None or requested == current:
        return None
    return StatusChange(previous=current.value, new=requested.value)
