from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator, Optional

from .model import AttendanceDay


class AttendanceLedger:
    """Attendance days keyed by (employee_id, work_date).

    put() replaces any existing record for the key, so a ledger can never hold
    two records for the same employee on the same date.
    """

    def __init__(self, days: Iterable[AttendanceDay] = ()):
        self._days: dict[tuple[str, date], AttendanceDay] = {}
        for day in days:
            self.put(day)

    def put(self, day: AttendanceDay) -> Optional[AttendanceDay]:
        """Store ``day``; returns the record it replaced, if any."""
        previous = self._days.get(day.key)
        self._days[day.key] = day
        return previous

    def get(self, employee_id: str, work_date: date) -> Optional[AttendanceDay]:
        return self._days.get((employee_id, work_date))

    def remove(self, employee_id: str, work_date: date) -> Optional[AttendanceDay]:
        return self._days.pop((employee_id, work_date), None)

    def for_employee_month(self, employee_id: str, year: int, month: int) -> list[AttendanceDay]:
        items = [
            d
            for (emp, work_date), d in self._days.items()
            if emp == employee_id and work_date.year == year and work_date.month == month
        ]
        items.sort(key=lambda d: d.work_date)
        return items

    def __len__(self) -> int:
        return len(self._days)

    def __iter__(self) -> Iterator[AttendanceDay]:
        return iter(sorted(self._days.values(), key=lambda d: (d.employee_id, d.work_date)))
