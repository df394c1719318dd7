from datetime import UTC, datetime


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form stored in every table."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    # Naive input is taken to be UTC already
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
