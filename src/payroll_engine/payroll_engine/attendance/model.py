from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayStatus, ShiftType


@dataclass(frozen=True)
class DayHours:
    """Result of the daily calculation; actual_work_hrs is the uncapped net."""

    work_hrs: float
    ot_hrs: float
    pending_hrs: float
    actual_work_hrs: float = 0.0


@dataclass(frozen=True)
class AttendanceDay:
    """Domain entity: one attendance record per (employee_id, work_date).

    Times are stored as "H:MM AM|PM" text; "" means no time recorded.
    """

    employee_id: str
    work_date: date
    status: DayStatus
    shift_type: Optional[ShiftType] = None
    check_in: str = ""
    lunch_in: str = ""
    lunch_out: str = ""
    check_out: str = ""
    work_hrs: float = 0.0
    ot_hrs: float = 0.0
    pending_hrs: float = 0.0
    note: Optional[str] = None

    @property
    def key(self) -> tuple[str, date]:
        return self.employee_id, self.work_date


@dataclass(frozen=True)
class LeaveRange:
    """Approved leave, inclusive on both ends."""

    employee_id: str
    start_date: date
    end_date: date

    def covers(self, employee_id: str, work_date: date) -> bool:
        return self.employee_id == employee_id and self.start_date <= work_date <= self.end_date
