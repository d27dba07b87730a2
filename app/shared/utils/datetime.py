"""UTC datetime helpers.

Every timestamp the service stores or snapshots is timezone-aware UTC:
employee created/updated/deleted times and history created_at.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime (never datetime.utcnow())."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize a datetime read back from the database to aware UTC.

    Naive values are taken to already be UTC; aware values are converted.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def isoformat_utc(dt: datetime) -> str:
    """ISO-8601 text of dt in UTC, as stored in history snapshots."""
    return ensure_utc(dt).isoformat()
