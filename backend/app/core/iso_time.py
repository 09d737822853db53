"""ISO-8601 Formatting — UTC timestamps with millisecond precision and 'Z' suffix.

Invariants:
    - Naive datetimes are treated as UTC (SQLite drops tzinfo on read)
    - Output shape is always YYYY-MM-DDTHH:MM:SS.mmmZ
"""

from datetime import datetime, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_iso8601(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso8601() -> str:
    return to_iso8601(datetime.now(timezone.utc))
