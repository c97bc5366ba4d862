"""Timestamps rendered for progress messages, in UTC."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

DATE_TIME_HMS = len("00:51:45")
"""Length of an `hours:minutes:seconds` string."""

_DATE_TIME_YMD_HMS = len("2020-02-13T00:51:45")

TimeLike = Union[datetime, int, float]


def _to_utc(time: TimeLike) -> datetime:
    """Convert a datetime or POSIX timestamp to an aware UTC datetime.

    Naive datetimes are taken to be in UTC already.
    """
    if isinstance(time, datetime):
        if time.tzinfo is None:
            return time.replace(tzinfo=timezone.utc)
        return time.astimezone(timezone.utc)
    if isinstance(time, bool) or not isinstance(time, (int, float)):
        raise TypeError(f"expected a datetime or a timestamp, got {type(time).__name__}")
    return datetime.fromtimestamp(time, timezone.utc)


def format_time_for_messages(time: TimeLike) -> str:
    """Return `time` as `HH:MM:SS` in UTC, truncated to whole seconds."""
    return _to_utc(time).strftime("%H:%M:%S")


def format_now_datetime_seconds() -> str:
    """Return the current date and time in UTC as `YYYY-MM-DDTHH:MM:SS`."""
    text = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    return text[:_DATE_TIME_YMD_HMS]