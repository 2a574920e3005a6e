"""Date and clock-time helpers shared by the store, aggregators and importer.

Appointments carry a calendar date (no time zone) and a 24-hour "HH:MM"
clock string. Keeping the string zero-padded makes lexicographic comparison
match chronological order.
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{1,2})(?::(\d{1,2})(?:\.\d+)?)?\s*$")

# Spreadsheet serial dates count from 1900-01-01 as day 1
SPREADSHEET_EPOCH = date(1900, 1, 1)


def parse_date(value: Any) -> Optional[date]:
    """Parse a calendar date from a date, datetime or ISO-8601 string.

    Returns None when the value cannot be interpreted as a date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def date_from_serial(serial: float) -> Optional[date]:
    """Convert a spreadsheet day count to a date.

    The day count is offset by one from 1900-01-01, so serial 1 is
    1900-01-01 and serial 45292 is 2024-01-02.
    """
    try:
        return SPREADSHEET_EPOCH + timedelta(days=int(serial) - 1)
    except (OverflowError, ValueError):
        return None


def normalize_time(value: Any) -> Optional[str]:
    """Return a zero-padded "HH:MM" string, or None if the value is not a clock time."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.strftime("%H:%M")
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if not isinstance(value, str):
        return None

    match = _TIME_PATTERN.match(value)
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def chronological_key(appointment) -> tuple:
    """Sort key ordering appointments by (date, time)."""
    return (appointment.date, appointment.time)

