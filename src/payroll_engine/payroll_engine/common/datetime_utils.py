from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Iterator

from ..core.exceptions import ValidationError

_MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_month_key(month: str) -> tuple[int, int]:
    """Split a "YYYY-MM" key into (year, month)."""
    match = _MONTH_KEY_RE.match(month or "")
    if not match:
        raise ValidationError(f"Invalid month (YYYY-MM): {month!r}")
    year, mon = int(match.group(1)), int(match.group(2))
    if not 1 <= mon <= 12:
        raise ValidationError(f"Invalid month (YYYY-MM): {month!r}")
    return year, mon


def month_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def days_in_month(month: str) -> int:
    year, mon = parse_month_key(month)
    return calendar.monthrange(year, mon)[1]


def iter_month_dates(month: str) -> Iterator[date]:
    year, mon = parse_month_key(month)
    for day in range(1, calendar.monthrange(year, mon)[1] + 1):
        yield date(year, mon, day)


def is_sunday(value: date) -> bool:
    return value.weekday() == calendar.SUNDAY
