"""Date and time utility functions."""

from datetime import datetime, timezone


def from_timestamp(epoch_seconds: float) -> datetime:
    """Convert a POSIX timestamp (e.g. ``st_mtime``) to an aware UTC datetime."""
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """Format datetime as ISO 8601 UTC with milliseconds and a ``Z`` suffix.

    Naive datetimes are taken to be UTC already.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
