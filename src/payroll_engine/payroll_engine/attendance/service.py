from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import month_key
from ..common.time_text import format_hours
from ..core.engine_config import EngineConfig
from ..core.enums import DayStatus, ShiftType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..holidays.model import holiday_on
from ..holidays.repository import HolidayRepository
from ..shifts.model import default_shift_type
from .factory import WorkHourCalculatorFactory
from .model import AttendanceDay
from .repository import AttendanceRepository, LeaveRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayEntry:
    """Operator input for one day, times as "H:MM AM|PM" text."""

    status: str
    shift_type: Optional[str] = None
    check_in: str = ""
    lunch_in: str = ""
    lunch_out: str = ""
    check_out: str = ""
    note: Optional[str] = None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        holidays: HolidayRepository,
        leaves: LeaveRepository,
        *,
        config: EngineConfig,
        calculator_factory: WorkHourCalculatorFactory | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._holidays = holidays
        self._leaves = leaves
        self._config = config
        self._calculator = (calculator_factory or WorkHourCalculatorFactory()).for_config(config)

    def effective_status(self, *, employee_id: str, department: str, work_date: date, requested: DayStatus) -> DayStatus:
        """An applicable holiday wins over approved leave, which wins over the operator's status."""
        if holiday_on(self._holidays.list_for_month(month_key(work_date)), work_date, department):
            return DayStatus.HOLIDAY
        for leave in self._leaves.list_approved_for_employee(employee_id):
            if leave.covers(employee_id, work_date):
                return DayStatus.LEAVE
        return requested

    def record_day(self, *, employee_id: str, work_date: date, entry: DayEntry) -> AttendanceDay:
        """Compute and store the single record for (employee_id, work_date)."""
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        requested = DayStatus.parse(entry.status)
        if requested is None:
            raise ValidationError(f"Unknown attendance status: {entry.status!r}")

        try:
            shift_type = ShiftType(entry.shift_type) if entry.shift_type else default_shift_type(work_date)
        except ValueError:
            raise ValidationError(f"Unknown shift type: {entry.shift_type!r}")

        status = self.effective_status(
            employee_id=employee_id,
            department=employee.department_name,
            work_date=work_date,
            requested=requested,
        )
        hours = self._calculator.compute_day(
            check_in=entry.check_in,
            lunch_in=entry.lunch_in,
            lunch_out=entry.lunch_out,
            check_out=entry.check_out,
            shift_type=shift_type,
            status=status,
        )

        day = AttendanceDay(
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            shift_type=shift_type,
            check_in=entry.check_in or "",
            lunch_in=entry.lunch_in or "",
            lunch_out=entry.lunch_out or "",
            check_out=entry.check_out or "",
            work_hrs=hours.work_hrs,
            ot_hrs=hours.ot_hrs,
            pending_hrs=hours.pending_hrs,
            note=(entry.note or "").strip() or None,
        )
        self._attendance.upsert_day(day)
        logger.info(
            "Recorded %s for employee %s on %s (work %s, ot %s, pending %s)",
            status.value,
            employee_id,
            work_date.isoformat(),
            format_hours(day.work_hrs),
            format_hours(day.ot_hrs),
            format_hours(day.pending_hrs),
        )
        return day
