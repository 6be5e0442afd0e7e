from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def current_year(clock=now_utc) -> int:
    """Calendar year according to `clock` (UTC by default)."""
    return clock().year
