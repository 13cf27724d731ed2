from __future__ import annotations

from datetime import date

import pytest

from src.payroll_engine.payroll_engine.attendance.model import AttendanceDay
from src.payroll_engine.payroll_engine.core.engine_config import EngineConfig
from src.payroll_engine.payroll_engine.core.enums import DayStatus, Department
from src.payroll_engine.payroll_engine.core.exceptions import NotFoundError, ValidationError
from src.payroll_engine.payroll_engine.employees.model import Employee
from src.payroll_engine.payroll_engine.timesheet.service import TimesheetService


class FakeAttendanceRepo:
    def __init__(self, days):
        self._days = list(days)

    def list_month(self, *, month, employee_id=None):
        return [
            d
            for d in self._days
            if d.work_date.strftime("%Y-%m") == month and (employee_id is None or d.employee_id == employee_id)
        ]


class FakeEmployeesRepo:
    def __init__(self, employees):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id):
        return self._by_id.get(employee_id)


class FakeSummaryRepo:
    def __init__(self):
        self.saved = {}

    def get(self, *, employee_id, month):
        return self.saved.get((employee_id, month))

    def save(self, summary):
        self.saved[(summary.employee_id, summary.month)] = summary


def _service(summaries):
    days = [
        AttendanceDay(employee_id="S1", work_date=date(2024, 6, 2), status=DayStatus.PRESENT, check_in="9:00 AM", check_out="1:00 PM"),
        AttendanceDay(employee_id="S1", work_date=date(2024, 6, 3), status=DayStatus.PRESENT, check_in="10:00 AM", check_out="6:30 PM"),
        AttendanceDay(employee_id="S1", work_date=date(2024, 7, 1), status=DayStatus.PRESENT, check_in="10:00 AM", check_out="6:30 PM"),
    ]
    return TimesheetService(
        FakeAttendanceRepo(days),
        FakeEmployeesRepo([Employee(employee_id="S1", name="Meena", department=Department.STAFF)]),
        summaries,
        config=EngineConfig.default(),
    )


def test_recompute_persists_the_returned_summary():
    summaries = FakeSummaryRepo()

    ts = _service(summaries).recompute(employee_id="S1", month="2024-06")

    assert summaries.get(employee_id="S1", month="2024-06") == ts.summary
    assert ts.summary.marked_days_count == 2
    assert ts.summary.sunday_allowance == pytest.approx(500.0)
    assert len(ts.lines) == 30


def test_recompute_is_idempotent():
    summaries = FakeSummaryRepo()
    svc = _service(summaries)

    first = svc.recompute(employee_id="S1", month="2024-06").summary
    second = svc.recompute(employee_id="S1", month="2024-06").summary

    assert first == second
    assert len(summaries.saved) == 1


def test_recompute_rejects_unknown_employee_and_bad_month():
    svc = _service(FakeSummaryRepo())

    with pytest.raises(NotFoundError):
        svc.recompute(employee_id="X1", month="2024-06")
    with pytest.raises(ValidationError):
        svc.recompute(employee_id="S1", month="June")
