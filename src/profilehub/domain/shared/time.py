"""Timestamps used across profilehub.

Every datetime the domain stores is timezone-aware UTC. SQLite hands back
naive values, so repositories pass what they load through
:func:`ensure_tz_aware`.
"""

from datetime import date, datetime, timezone

UTC = timezone.utc


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def utc_today() -> date:
    return utc_now().date()


def ensure_tz_aware(value: datetime) -> datetime:
    """Read naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
