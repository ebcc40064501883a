from datetime import date, datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso8601(moment: datetime) -> str:
    """Render as UTC with millisecond precision and a Z suffix, e.g. 2024-05-01T13:45:00.000Z"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_to_iso8601(seconds: Optional[float]) -> Optional[str]:
    if not seconds:
        return None
    return to_iso8601(datetime.fromtimestamp(seconds, tz=timezone.utc))


def date_window(end: date, days: int) -> tuple[str, str]:
    """Return (start, end) ISO calendar dates for a trailing window ending on `end`."""
    start = end - timedelta(days=days)
    return start.isoformat(), end.isoformat()
