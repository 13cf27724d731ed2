from __future__ import annotations

from datetime import date
from typing import Iterable

from ..attendance.factory import WorkHourCalculatorFactory
from ..attendance.ledger import AttendanceLedger
from ..attendance.model import AttendanceDay
from ..common.datetime_utils import is_sunday, iter_month_dates, parse_month_key
from ..common.numbers import round_hours, round_money
from ..core.engine_config import EngineConfig
from ..core.enums import DayStatus, Department, ShiftType
from ..shifts.model import default_shift_type
from .model import MonthlySummary, MonthlyTimesheet, TimesheetLine


class MonthlyAggregator:
    """Sums one employee's month of attendance into a timesheet and summary.

    Day hours are recomputed from the stored times with the configured
    calculator, so a summary always reflects the current rules.
    """

    def __init__(self, config: EngineConfig, *, calculator_factory: WorkHourCalculatorFactory | None = None):
        self._config = config
        self._calculator = (calculator_factory or WorkHourCalculatorFactory()).for_config(config)

    def aggregate(
        self,
        *,
        employee_id: str,
        department: str,
        month: str,
        days: Iterable[AttendanceDay],
    ) -> MonthlyTimesheet:
        year, mon = parse_month_key(month)
        ledger = AttendanceLedger(d for d in days if d.employee_id == employee_id)
        is_staff = department == Department.STAFF.value

        lines: list[TimesheetLine] = []
        status_counts = {s.value: 0 for s in DayStatus}
        full_days = 0
        marked = 0
        total_work = total_ot = total_pending = 0.0
        sunday_present = 0
        sunday_work = sunday_ot = 0.0

        for work_date in iter_month_dates(month):
            sunday = is_sunday(work_date)
            rec = ledger.get(employee_id, work_date)
            if rec is None:
                lines.append(self._unmarked_line(work_date, sunday))
                continue

            shift_type = rec.shift_type or default_shift_type(work_date)
            hours = self._calculator.compute_day(
                check_in=rec.check_in,
                lunch_in=rec.lunch_in,
                lunch_out=rec.lunch_out,
                check_out=rec.check_out,
                shift_type=shift_type,
                status=rec.status,
            )
            lines.append(
                TimesheetLine(
                    work_date=work_date,
                    status=rec.status,
                    shift_type=shift_type,
                    check_in=rec.check_in,
                    lunch_in=rec.lunch_in,
                    lunch_out=rec.lunch_out,
                    check_out=rec.check_out,
                    work_hrs=hours.work_hrs,
                    ot_hrs=hours.ot_hrs,
                    pending_hrs=hours.pending_hrs,
                    is_marked=True,
                )
            )

            marked += 1
            status_counts[rec.status.value] += 1
            total_work += hours.work_hrs
            total_ot += hours.ot_hrs
            total_pending += hours.pending_hrs

            if rec.status == DayStatus.PRESENT and hours.pending_hrs == 0:
                full_days += 1

            if sunday and rec.status == DayStatus.PRESENT:
                if is_staff:
                    sunday_present += 1
                else:
                    sunday_work += hours.work_hrs
                    sunday_ot += hours.work_hrs + hours.ot_hrs

        sunday_ot_hours = 0.0 if is_staff else round_hours(sunday_ot)
        summary = MonthlySummary(
            employee_id=employee_id,
            month=f"{year:04d}-{mon:02d}",
            department=department,
            full_working_days_count=full_days,
            sunday_allowance=round_money(sunday_present * self._config.sunday_allowance_staff) if is_staff else 0.0,
            sunday_ot_hours=sunday_ot_hours,
            sunday_ot_amount=round_money(sunday_ot_hours * self._config.ot_rate_per_hour),
            sunday_present_count=sunday_present,
            sunday_work_hours=round_hours(sunday_work),
            total_work_hrs=round_hours(total_work),
            total_ot_hrs=round_hours(total_ot),
            total_pending_hrs=round_hours(total_pending),
            net_ot_hrs=round_hours(total_ot - total_pending),
            marked_days_count=marked,
            is_finalizable=marked >= self._config.min_marked_days_to_finalize,
            status_counts=status_counts,
        )
        return MonthlyTimesheet(lines=lines, summary=summary)

    def _unmarked_line(self, work_date: date, sunday: bool) -> TimesheetLine:
        shift_type = ShiftType.SUNDAY if sunday else ShiftType.DAY
        pending = 0.0 if sunday else self._config.shift(ShiftType.DAY).target_hours
        return TimesheetLine(
            work_date=work_date,
            status=DayStatus.HOLIDAY if sunday else DayStatus.ABSENT,
            shift_type=shift_type,
            check_in="",
            lunch_in="",
            lunch_out="",
            check_out="",
            work_hrs=0.0,
            ot_hrs=0.0,
            pending_hrs=pending,
            is_marked=False,
        )
