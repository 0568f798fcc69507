"""ISO-8601 timestamp parsing and canonical formatting for `published`"""

from datetime import date, datetime, timezone


def parse_timestamp(value) -> datetime:
    """Return a UTC-aware datetime from ISO-8601 text or a YAML date/datetime.

    Naive values are taken as UTC. Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise ValueError(f"expected an ISO-8601 timestamp, got {value!r}") from e
    else:
        raise ValueError(f"expected an ISO-8601 timestamp, got {type(value).__name__}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """Render dt as `YYYY-MM-DDTHH:MM:SS.sssZ` in UTC (millisecond precision)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{dt.microsecond // 1000:03d}Z"
