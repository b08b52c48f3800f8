from datetime import datetime, timezone

from ..common.settings import settings


def fromStatTime(seconds: float) -> datetime:
    """
    Converts a filesystem timestamp (seconds since the epoch, as found in
    os.stat_result) to a timezone-aware UTC datetime object.
    """
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def toUTC(value: datetime) -> datetime:
    """
    Converts a datetime object to UTC.

    If the datetime object is naive (no timezone info), assume it's in the
    system's local time and make it timezone-aware first.
    """
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        value = value.astimezone()
    return value.astimezone(timezone.utc)


def formatUTC(value: datetime, fmt: str | None = None) -> str:
    """
    Renders a datetime for display in UTC, e.g. "2023-01-01 12:00:00 UTC".
    """
    return toUTC(value).strftime(fmt or settings.timestamp_format)
