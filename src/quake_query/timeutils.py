"""Local-to-UTC time helpers for query construction."""

from __future__ import annotations

from datetime import datetime, timezone

WIRE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def now_utc() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def make_instant(year: int, month: int, day: int, hour: int, minute: int) -> datetime:
    """Build a naive calendar instant with seconds fixed at zero.

    Invalid components (month 13, Feb 30, ...) raise ``ValueError``.
    """
    return datetime(year, month, day, hour, minute, 0)


def to_utc(local: datetime) -> datetime:
    """Interpret a naive datetime in the local timezone and convert to UTC.

    Aware datetimes are converted from their own offset.
    """
    return local.astimezone(timezone.utc)


def format_wire_time(instant: datetime) -> str:
    """Render an instant the way the FDSN event service expects it."""
    return to_utc(instant).strftime(WIRE_TIME_FORMAT)
