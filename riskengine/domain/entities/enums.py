"""
Risk Engine Domain Enums

All enumeration types used across domain entities.
Values are the labels shown to users and accepted over the API.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user; the only authorization axis"""

    admin = "Admin"
    risk_manager = "Risk Manager"
    team_member = "Team Member"
    viewer = "Viewer"


class RiskCategory(str, Enum):
    technical = "Technical"
    financial = "Financial"
    operational = "Operational"
    strategic = "Strategic"
    compliance = "Compliance"
    security = "Security"
    other = "Other"


class RiskSource(str, Enum):
    internal_audit = "Internal Audit"
    external_audit = "External Audit"
    customer_feedback = "Customer Feedback"
    incident_report = "Incident Report"
    project_review = "Project Review"
    regulatory_change = "Regulatory Change"
    market_analysis = "Market Analysis"
    other = "Other"


class RiskStatus(str, Enum):
    """Risk lifecycle status"""

    identified = "Identified"
    assigned = "Assigned"
    in_mitigation = "In Mitigation"
    resolved = "Resolved"
    closed = "Closed"


class AssignmentStatus(str, Enum):
    """Assignment status; completed and cancelled are terminal"""

    pending = "Pending"
    in_progress = "In Progress"
    under_review = "Under Review"
    completed = "Completed"
    cancelled = "Cancelled"


class PriorityLevel(str, Enum):
    critical = "Critical"
    high = "High"
    medium = "Medium"
    low = "Low"


class IdentifierKind(str, Enum):
    """Entity kinds that receive a human-readable identifier"""

    risk = "RISK"
    assignment = "ASGN"


TERMINAL_ASSIGNMENT_STATUSES = frozenset(
    {AssignmentStatus.completed, AssignmentStatus.cancelled}
)


class UpdateType:
    """Audit record labels written by the engine itself"""

    STATUS_CHANGE = "Status Change"
    ASSIGNMENT_CREATED = "Assignment Created"
    ASSIGNMENT_STATUS_CHANGE = "Assignment Status Change"
