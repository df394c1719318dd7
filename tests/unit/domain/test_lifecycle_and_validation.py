from datetime import datetime, timedelta, timezone

from riskengine.domain.base import to_naive_utc
from riskengine.domain.entities import AssignmentStatus, PriorityLevel, RiskStatus
from riskengine.domain.lifecycle import status_change
from riskengine.domain.validation import (
    parse_choice,
    validate_deadline,
    validate_risk_description,
)


def test_status_change_reports_previous_and_new():
    change = status_change(RiskStatus.identified, RiskStatus.in_mitigation)
    assert change.previous == "Identified"
    assert change.new == "In Mitigation"


def test_status_change_is_none_when_unchanged_or_omitted():
    assert status_change(RiskStatus.assigned, RiskStatus.assigned) is None
    assert status_change(RiskStatus.assigned, None) is None


def test_backward_transitions_are_permitted():
    change = status_change(RiskStatus.closed, RiskStatus.identified)
    assert change == ("Closed", "Identified")


def test_status_change_for_assignments():
    change = status_change(AssignmentStatus.pending, AssignmentStatus.completed)
    assert change == ("Pending", "Completed")


def test_description_bounds():
    assert validate_risk_description("A" * 20) is None
    assert validate_risk_description("A" * 1000) is None
    assert validate_risk_description("A" * 19).code == "INVALID_DESCRIPTION"
    assert validate_risk_description("A" * 1001).code == "INVALID_DESCRIPTION"
    assert validate_risk_description("").code == "INVALID_DESCRIPTION"
    assert validate_risk_description(None).kind == "validation"


def test_parse_choice():
    assert parse_choice(PriorityLevel, "Critical", "INVALID_PRIORITY", "priority").value == (
        PriorityLevel.critical
    )

    result = parse_choice(PriorityLevel, "Urgent", "INVALID_PRIORITY", "priority")
    assert result.is_err()
    assert result.error.code == "INVALID_PRIORITY"
    assert "Critical, High, Medium, Low" in result.error.message


def test_deadline_must_be_strictly_in_future():
    now = datetime(2024, 5, 1, 12, 0)
    assert validate_deadline(now + timedelta(seconds=1), now) is None
    assert validate_deadline(now, now).code == "INVALID_DEADLINE"
    assert validate_deadline(now - timedelta(days=1), now).code == "INVALID_DEADLINE"


def test_to_naive_utc_converts_offsets():
    aware = datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert to_naive_utc(aware) == datetime(2024, 5, 1, 12, 0)
    naive = datetime(2024, 5, 1, 12, 0)
    assert to_naive_utc(naive) is naive
