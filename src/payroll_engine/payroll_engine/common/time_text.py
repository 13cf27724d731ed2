"""Conversion between stored 12-hour time text and decimal hours.

Stored records use exactly ``"<H>:<MM> <AM|PM>"`` with no leading zero on the
hour (``"9:05 AM"``). Parsing is lenient (case-insensitive, optional space, zero
padded hours accepted); rendering always produces the canonical form.
"""

from __future__ import annotations

import math
import re
from typing import Optional

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)", re.IGNORECASE)


def split_time_text(text: Optional[str]) -> Optional[tuple[int, int, str]]:
    """Return (hour 1-12, minute, "AM"|"PM") or None when the text is not a time."""
    if not text or not str(text).strip():
        return None
    match = _TIME_RE.search(str(text))
    if not match:
        return None
    hour = int(match.group(1))
    minute = int(match.group(2))
    if not 1 <= hour <= 12 or not 0 <= minute <= 59:
        return None
    return hour, minute, match.group(3).upper()


def parse_time(text: Optional[str]) -> Optional[float]:
    """Parse "H:MM AM|PM" into decimal hours in [0, 24); None if unparseable."""
    parts = split_time_text(text)
    if parts is None:
        return None
    hour, minute, period = parts
    if period == "PM" and hour != 12:
        hour += 12
    if period == "AM" and hour == 12:
        hour = 0
    return hour + minute / 60


def _hours_and_minutes(value: float) -> tuple[int, int]:
    hours = int(math.floor(value))
    minutes = int(round((value - hours) * 60))
    if minutes == 60:
        hours += 1
        minutes = 0
    return hours, minutes


def format_hours(value: Optional[float], *, signed: bool = False) -> str:
    """Render decimal hours as "H:MM" (e.g. 8.25 -> "8:15").

    Negative values get a leading "-"; with ``signed=True`` positive values get "+".
    """
    if value is None or (isinstance(value, float) and (math.isnan(value) or math.isinf(value))):
        value = 0.0
    hours, minutes = _hours_and_minutes(abs(float(value)))
    if hours == 0 and minutes == 0:
        return "0:00"
    sign = ""
    if value < 0:
        sign = "-"
    elif signed:
        sign = "+"
    return f"{sign}{hours}:{minutes:02d}"


def to_time_text(hour: object, minute: object, period: Optional[str]) -> str:
    """Compose stored time text from picker components ("09", "05", "am" -> "9:05 AM").

    Returns "" when any component is missing, which the calculators read as "no time".
    """
    if hour in (None, "") or minute in (None, "") or not period:
        return ""
    return f"{int(hour)}:{int(minute):02d} {str(period).upper()}"


def format_time_text(value: Optional[float]) -> str:
    """Render decimal hours (any value, wrapped to 24h) as stored 12-hour text."""
    if value is None:
        return ""
    hours, minutes = _hours_and_minutes(float(value) % 24)
    hours %= 24
    period = "PM" if hours >= 12 else "AM"
    hour12 = hours % 12 or 12
    return f"{hour12}:{minutes:02d} {period}"
