import re
from datetime import datetime

import pytest

from riskengine.domain.entities import IdentifierKind
from riskengine.domain.identifiers import current_period, format_identifier, identifier_prefix


def test_current_period_is_zero_padded():
    assert current_period(datetime(2024, 5, 31, 23, 59)) == "2024-05"
    assert current_period(datetime(2024, 12, 1)) == "2024-12"


def test_format_identifier():
    assert format_identifier(IdentifierKind.risk, "2024-05", 7) == "RISK-2024-05-0007"
    assert format_identifier("ASGN", "2024-11", 123) == "ASGN-2024-11-0123"


def test_format_identifier_matches_public_pattern():
    identifier = format_identifier(IdentifierKind.risk, "2026-01", 1)
    assert re.fullmatch(r"RISK-\d{4}-\d{2}-\d{4}", identifier)


def test_sequence_beyond_four_digits_keeps_growing():
    assert format_identifier(IdentifierKind.assignment, "2024-05", 10000) == "ASGN-2024-05-10000"


def test_prefix():
    assert identifier_prefix(IdentifierKind.assignment, "2024-05") == "ASGN-2024-05-"


def test_rejects_non_positive_sequence():
    with pytest.raises(ValueError):
        format_identifier(IdentifierKind.risk, "2024-05", 0)


def test_rejects_unknown_kind():
    with pytest.raises(ValueError):
        identifier_prefix("TASK", "2024-05")
