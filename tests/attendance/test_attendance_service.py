from __future__ import annotations

from datetime import date

import pytest

from src.payroll_engine.payroll_engine.attendance.model import AttendanceDay, LeaveRange
from src.payroll_engine.payroll_engine.attendance.service import AttendanceService, DayEntry
from src.payroll_engine.payroll_engine.common.datetime_utils import month_key
from src.payroll_engine.payroll_engine.core.engine_config import EngineConfig
from src.payroll_engine.payroll_engine.core.enums import DayStatus, Department, ShiftType
from src.payroll_engine.payroll_engine.core.exceptions import NotFoundError, ValidationError
from src.payroll_engine.payroll_engine.employees.model import Employee
from src.payroll_engine.payroll_engine.holidays.model import Holiday


class FakeAttendanceRepo:
    def __init__(self):
        self.days: dict[tuple[str, date], AttendanceDay] = {}
        self.writes = 0

    def get_day(self, employee_id, work_date):
        return self.days.get((employee_id, work_date))

    def list_month(self, *, month, employee_id=None):
        return [
            d
            for d in self.days.values()
            if month_key(d.work_date) == month and (employee_id is None or d.employee_id == employee_id)
        ]

    def upsert_day(self, day):
        self.writes += 1
        self.days[day.key] = day


class FakeEmployeesRepo:
    def __init__(self, employees):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id):
        return self._by_id.get(employee_id)

    def list_active(self):
        return [e for e in self._by_id.values() if e.is_active]


class FakeHolidaysRepo:
    def __init__(self, holidays=()):
        self._holidays = list(holidays)

    def list_for_month(self, month):
        return [h for h in self._holidays if month_key(h.holiday_date) == month]


class FakeLeavesRepo:
    def __init__(self, leaves=()):
        self._leaves = list(leaves)

    def list_approved_for_employee(self, employee_id):
        return [l for l in self._leaves if l.employee_id == employee_id]


def _service(*, holidays=(), leaves=()):
    attendance = FakeAttendanceRepo()
    employees = FakeEmployeesRepo(
        [
            Employee(employee_id="W1", name="Ravi", department=Department.WORKER),
            Employee(employee_id="S1", name="Meena", department=Department.STAFF),
        ]
    )
    svc = AttendanceService(
        attendance,
        employees,
        FakeHolidaysRepo(holidays),
        FakeLeavesRepo(leaves),
        config=EngineConfig.default(),
    )
    return svc, attendance


def test_record_day_computes_hours_and_stores_one_record():
    svc, repo = _service()
    entry = DayEntry(status="Present", shift_type="day", check_in="10:00 AM", check_out="6:00 PM")

    day = svc.record_day(employee_id="W1", work_date=date(2024, 7, 1), entry=entry)

    assert day.status == DayStatus.PRESENT
    assert day.work_hrs == pytest.approx(8.0)
    assert day.pending_hrs == pytest.approx(0.5)
    assert repo.get_day("W1", date(2024, 7, 1)) == day


def test_recording_same_day_twice_replaces_the_record():
    svc, repo = _service()
    svc.record_day(
        employee_id="W1",
        work_date=date(2024, 7, 1),
        entry=DayEntry(status="Present", check_in="10:00 AM", check_out="2:00 PM"),
    )
    svc.record_day(
        employee_id="W1",
        work_date=date(2024, 7, 1),
        entry=DayEntry(status="Half Day", check_in="10:00 AM", check_out="2:30 PM"),
    )

    days = repo.list_month(month="2024-07", employee_id="W1")
    assert len(days) == 1
    assert days[0].status == DayStatus.HALF_DAY


def test_sunday_defaults_to_sunday_shift():
    svc, _ = _service()

    day = svc.record_day(
        employee_id="W1",
        work_date=date(2024, 7, 7),
        entry=DayEntry(status="Present", check_in="9:00 AM", check_out="1:00 PM"),
    )

    assert day.shift_type == ShiftType.SUNDAY
    assert day.work_hrs == pytest.approx(4.0)
    assert day.pending_hrs == 0


def test_holiday_overrides_operator_status():
    holiday = Holiday(holiday_date=date(2024, 7, 17), name="Muharram")
    svc, _ = _service(holidays=[holiday])

    day = svc.record_day(
        employee_id="W1",
        work_date=date(2024, 7, 17),
        entry=DayEntry(status="Present", check_in="10:00 AM", check_out="6:30 PM"),
    )

    assert day.status == DayStatus.HOLIDAY
    assert (day.work_hrs, day.ot_hrs, day.pending_hrs) == (0, 0, 0)


def test_department_specific_holiday_only_applies_to_that_department():
    holiday = Holiday(holiday_date=date(2024, 7, 17), name="Staff outing", departments=("Staff",))
    svc, _ = _service(holidays=[holiday])
    entry = DayEntry(status="Present", check_in="10:00 AM", check_out="6:30 PM")

    assert svc.record_day(employee_id="S1", work_date=date(2024, 7, 17), entry=entry).status == DayStatus.HOLIDAY
    assert svc.record_day(employee_id="W1", work_date=date(2024, 7, 17), entry=entry).status == DayStatus.PRESENT


def test_approved_leave_overrides_operator_status():
    leave = LeaveRange(employee_id="W1", start_date=date(2024, 7, 10), end_date=date(2024, 7, 12))
    svc, _ = _service(leaves=[leave])

    day = svc.record_day(employee_id="W1", work_date=date(2024, 7, 11), entry=DayEntry(status="Absent"))

    assert day.status == DayStatus.LEAVE


def test_holiday_wins_over_approved_leave():
    holiday = Holiday(holiday_date=date(2024, 7, 11), name="Local")
    leave = LeaveRange(employee_id="W1", start_date=date(2024, 7, 10), end_date=date(2024, 7, 12))
    svc, _ = _service(holidays=[holiday], leaves=[leave])

    day = svc.record_day(employee_id="W1", work_date=date(2024, 7, 11), entry=DayEntry(status="Present"))

    assert day.status == DayStatus.HOLIDAY


def test_record_day_rejects_bad_input():
    svc, repo = _service()

    with pytest.raises(NotFoundError):
        svc.record_day(employee_id="X9", work_date=date(2024, 7, 1), entry=DayEntry(status="Present"))
    with pytest.raises(ValidationError):
        svc.record_day(employee_id="W1", work_date=date(2024, 7, 1), entry=DayEntry(status="Sick"))
    with pytest.raises(ValidationError):
        svc.record_day(
            employee_id="W1",
            work_date=date(2024, 7, 1),
            entry=DayEntry(status="Present", shift_type="graveyard"),
        )
    assert repo.writes == 0
