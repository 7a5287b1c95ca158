"""Formatting of the current time, optionally at a fixed UTC offset."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)


class InvalidOffsetError(ValueError):
    """Raised when a UTC offset is not a number of hours strictly within ±24."""


def _expand(moment: datetime, directive: str) -> str:
    """Expand composite and meridiem directives so output is locale-independent."""
    meridiem = "AM" if moment.hour < 12 else "PM"
    match directive:
        case "r":
            return f"%I:%M:%S {meridiem}"
        case "T":
            return "%H:%M:%S"
        case "R":
            return "%H:%M"
        case "D":
            return "%m/%d/%y"
        case "F":
            return "%Y-%m-%d"
        case "p":
            return meridiem
        case "P":
            return meridiem.lower()
        case _:
            return f"%{directive}"


def format_time(time_format: str, moment: datetime) -> str:
    """Format ``moment`` with a strftime-style format string."""
    expanded = _DIRECTIVE.sub(lambda m: _expand(moment, m.group(1)), time_format)
    return moment.strftime(expanded)


def _parse_offset_hours(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise InvalidOffsetError("Invalid timezone offset.")
    try:
        return float(text)
    except ValueError:
        raise InvalidOffsetError("Invalid timezone offset.") from None


def create_offset_time_string(
    utc_time: datetime, utc_time_offset: str, time_format: str
) -> str:
    """Format ``utc_time`` shifted to a UTC offset given in (possibly fractional) hours.

    Raises InvalidOffsetError if the offset is not a number strictly between
    -24 and 24.
    """
    hours = _parse_offset_hours(utc_time_offset)
    if not -24 < hours < 24:
        raise InvalidOffsetError("Invalid timezone offset.")

    offset = timezone(timedelta(seconds=int(hours * 3600)))
    if utc_time.tzinfo is None:
        utc_time = utc_time.replace(tzinfo=timezone.utc)
    return format_time(time_format, utc_time.astimezone(offset))