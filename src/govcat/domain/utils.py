"""Domain layer utilities: UTC timestamps at millisecond precision.

Service timestamps are kept at millisecond precision, matching their
serialized form (``2024-01-01T00:00:00.000Z``), so a record returned by
`create` compares equal to the same record read back from the store.
"""

from datetime import datetime, timezone


def truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision from `value`."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utc_now_ms() -> datetime:
    """Current UTC time, truncated to milliseconds."""
    return truncate_to_millis(datetime.now(timezone.utc))


def format_timestamp(value: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with milliseconds and a ``Z`` suffix.

    Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp into a tz-aware UTC datetime.

    Accepts a trailing ``Z``, explicit offsets, and naive values (read as UTC).

    Raises:
        ValueError: If `text` is not an ISO-8601 timestamp.
    """
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
