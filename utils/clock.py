from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current server time, timezone-aware UTC."""
    return datetime.now(timezone.utc)


def to_instant_string(dt: datetime) -> str:
    """
    Format a timestamp as an ISO-8601 instant, e.g. ``2026-10-19T08:30:00.123456Z``.
    Naive values are taken to be UTC already.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')
