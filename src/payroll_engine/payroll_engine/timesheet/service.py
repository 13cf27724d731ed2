from __future__ import annotations

import logging

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_month_key
from ..core.engine_config import EngineConfig
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .aggregator import MonthlyAggregator
from .model import MonthlyTimesheet
from .repository import SummaryRepository

logger = logging.getLogger(__name__)


class TimesheetService:
    """Recompute-on-read monthly timesheets.

    Each call recomputes the summary from the stored days and overwrites the
    persisted copy, so the returned and stored summaries are identical.
    Concurrent recomputations for the same employee/month are last-write-wins.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        summaries: SummaryRepository,
        *,
        config: EngineConfig,
        aggregator: MonthlyAggregator | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._summaries = summaries
        self._aggregator = aggregator or MonthlyAggregator(config)

    def recompute(self, *, employee_id: str, month: str) -> MonthlyTimesheet:
        parse_month_key(month)
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        days = self._attendance.list_month(month=month, employee_id=employee_id)
        timesheet = self._aggregator.aggregate(
            employee_id=employee_id,
            department=employee.department_name,
            month=month,
            days=days,
        )
        self._summaries.save(timesheet.summary)
        logger.info(
            "Timesheet %s/%s recomputed: %d marked days, %d full days",
            employee_id,
            month,
            timesheet.summary.marked_days_count,
            timesheet.summary.full_working_days_count,
        )
        return timesheet
