"""
Clock labels for activities.

Activities keep structured start/end times; the display label is derived
from them. Older files only stored the label, so it can be parsed back.
"""
import re
from datetime import time
from typing import Optional, Tuple


RANGE_SEPARATOR = " – "

_RANGE_SPLIT = re.compile(r"\s*[–—]\s*|\s+-\s+|(?<=\d)-(?=\d)|(?<=[AaPp][Mm])-")
_CLOCK = re.compile(
    r"^(?P<hour>\d{1,2})(?:[:.](?P<minute>\d{2}))?\s*(?P<meridiem>[AaPp])?\.?\s*(?:[Mm]\.?)?$"
)


def format_clock(value: time) -> str:
    """Format a time as a short 12-hour clock, e.g. '9:30 AM'."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {meridiem}"


def format_time_range(start: Optional[time], end: Optional[time]) -> str:
    """Build the display label for an activity's time slot."""
    if start is None:
        return ""
    if end is None or end == start:
        return format_clock(start)
    return f"{format_clock(start)}{RANGE_SEPARATOR}{format_clock(end)}"


def parse_clock(text: str) -> Optional[time]:
    """Parse '09:30', '9:30 AM', '9.30pm' or '9 PM'. Returns None when unreadable."""
    cleaned = text.replace("\u202f", " ").replace("\u00a0", " ").strip()
    match = _CLOCK.match(cleaned)
    if not match:
        return None

    hour = int(match.group("hour"))
    minute = int(match.group("minute") or 0)
    meridiem = match.group("meridiem")

    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12
        if meridiem.lower() == "p":
            hour += 12
    elif match.group("minute") is None:
        # A bare number is not a time
        return None

    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def parse_time_label(label: str) -> Tuple[Optional[time], Optional[time]]:
    """
    Split a stored label into (start, end).

    Handles single times and ranges joined by an en dash, em dash or
    hyphen. Anything unreadable yields (None, None).
    """
    if not label or not label.strip():
        return None, None

    normalized = label.replace("\u202f", " ").replace("\u00a0", " ").strip()
    parts = [p for p in _RANGE_SPLIT.split(normalized) if p.strip()]
    if not parts:
        return None, None

    start = parse_clock(parts[0])
    if start is None:
        return None, None

    end = parse_clock(parts[1]) if len(parts) > 1 else None
    return start, end


def minutes_since_midnight(value: Optional[time]) -> int:
    """Sort key for a time of day; missing times sort at minute 0."""
    if value is None:
        return 0
    return value.hour * 60 + value.minute
