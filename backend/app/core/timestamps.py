"""Timestamps: ISO-8601 formatting for the status endpoint.

Invariants:
    - Output is always UTC, millisecond precision, 'Z' suffix
      (e.g. 2023-12-07T10:30:00.000Z)
    - Naive datetimes are treated as UTC
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_iso_timestamp(moment: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC string with a 'Z' suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
