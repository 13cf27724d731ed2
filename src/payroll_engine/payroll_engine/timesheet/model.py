from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Sequence

from ..core.enums import DayStatus, ShiftType


@dataclass(frozen=True)
class TimesheetLine:
    """One calendar day of a monthly timesheet.

    Unmarked days (no stored record) are shown for display only and never
    contribute to the summary totals.
    """

    work_date: date
    status: DayStatus
    shift_type: ShiftType
    check_in: str
    lunch_in: str
    lunch_out: str
    check_out: str
    work_hrs: float
    ot_hrs: float
    pending_hrs: float
    is_marked: bool


@dataclass(frozen=True)
class MonthlySummary:
    """Derived figures for one employee and month; recomputed, never patched."""

    employee_id: str
    month: str
    department: str
    full_working_days_count: int
    sunday_allowance: float
    sunday_ot_hours: float
    sunday_ot_amount: float
    sunday_present_count: int
    sunday_work_hours: float
    total_work_hrs: float
    total_ot_hrs: float
    total_pending_hrs: float
    net_ot_hrs: float
    marked_days_count: int
    is_finalizable: bool
    status_counts: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class MonthlyTimesheet:
    lines: Sequence[TimesheetLine]
    summary: MonthlySummary
