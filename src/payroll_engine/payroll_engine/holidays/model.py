from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.constants import ALL_DEPARTMENTS


@dataclass(frozen=True)
class Holiday:
    """Company holiday; departments holds names or the single marker "All"."""

    holiday_date: date
    name: str
    departments: Sequence[str] = (ALL_DEPARTMENTS,)

    def applies_to(self, department: str) -> bool:
        return ALL_DEPARTMENTS in self.departments or department in self.departments


def applicable_holiday_count(holidays: Iterable[Holiday], department: str, *, year: int, month: int) -> int:
    """Holidays in the given month that apply to ``department``."""
    return sum(
        1
        for h in holidays
        if h.holiday_date.year == year and h.holiday_date.month == month and h.applies_to(department)
    )


def holiday_on(holidays: Iterable[Holiday], work_date: date, department: str) -> Optional[Holiday]:
    for h in holidays:
        if h.holiday_date == work_date and h.applies_to(department):
            return h
    return None
