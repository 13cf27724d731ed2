from datetime import date

import pytest

from src.payroll_engine.payroll_engine.attendance.model import AttendanceDay
from src.payroll_engine.payroll_engine.core.engine_config import EngineConfig
from src.payroll_engine.payroll_engine.core.enums import DayStatus, NonWorkingDayPolicy, ShiftType
from src.payroll_engine.payroll_engine.timesheet.aggregator import MonthlyAggregator


def _day(d, status, check_in="", check_out="", emp="W1", shift=None):
    return AttendanceDay(
        employee_id=emp,
        work_date=date(2024, 7, d),
        status=status,
        shift_type=shift,
        check_in=check_in,
        check_out=check_out,
    )


WORKER_MONTH = [
    _day(1, DayStatus.PRESENT, "10:00 AM", "6:30 PM"),
    _day(2, DayStatus.PRESENT, "10:00 AM", "8:00 PM"),
    _day(3, DayStatus.PRESENT, "10:00 AM", "6:00 PM"),
    _day(4, DayStatus.HALF_DAY, "10:00 AM", "2:30 PM"),
    _day(5, DayStatus.LEAVE),
    _day(7, DayStatus.PRESENT, "9:00 AM", "2:00 PM"),
]


def test_worker_month_totals():
    ts = MonthlyAggregator(EngineConfig.default()).aggregate(
        employee_id="W1", department="Worker", month="2024-07", days=WORKER_MONTH
    )
    s = ts.summary

    assert s.marked_days_count == 6
    assert s.full_working_days_count == 3
    assert s.total_work_hrs == pytest.approx(33.5)
    assert s.total_ot_hrs == pytest.approx(2.5)
    assert s.total_pending_hrs == pytest.approx(4.5)
    assert s.net_ot_hrs == pytest.approx(-2.0)
    assert s.status_counts["Present"] == 4
    assert s.status_counts["Half Day"] == 1
    assert s.status_counts["Leave"] == 1
    assert s.is_finalizable is False


def test_worker_sunday_hours_are_paid_at_ot_rate():
    s = MonthlyAggregator(EngineConfig.default()).aggregate(
        employee_id="W1", department="Worker", month="2024-07", days=WORKER_MONTH
    ).summary

    assert s.sunday_work_hours == pytest.approx(4.0)
    assert s.sunday_ot_hours == pytest.approx(5.0)
    assert s.sunday_ot_amount == pytest.approx(350.0)
    assert s.sunday_allowance == 0
    assert s.sunday_present_count == 0


def test_staff_sundays_earn_fixed_allowance():
    days = [
        _day(7, DayStatus.PRESENT, "9:00 AM", "1:00 PM", emp="S1"),
        _day(14, DayStatus.PRESENT, "9:30 AM", "12:00 PM", emp="S1"),
        _day(21, DayStatus.ABSENT, emp="S1"),
    ]
    s = MonthlyAggregator(EngineConfig.default()).aggregate(
        employee_id="S1", department="Staff", month="2024-07", days=days
    ).summary

    assert s.sunday_present_count == 2
    assert s.sunday_allowance == pytest.approx(1000.0)
    assert s.sunday_ot_hours == 0
    assert s.sunday_ot_amount == 0


def test_every_calendar_day_gets_a_line_but_only_marked_days_count():
    ts = MonthlyAggregator(EngineConfig.default()).aggregate(
        employee_id="W1", department="Worker", month="2024-07", days=WORKER_MONTH
    )
    by_day = {line.work_date.day: line for line in ts.lines}

    assert len(ts.lines) == 31
    assert by_day[6].is_marked is False
    assert by_day[6].status == DayStatus.ABSENT
    assert by_day[6].pending_hrs == pytest.approx(8.5)
    assert by_day[14].status == DayStatus.HOLIDAY
    assert by_day[14].shift_type == ShiftType.SUNDAY
    assert by_day[14].pending_hrs == 0
    assert by_day[7].shift_type == ShiftType.SUNDAY
    # 25 unmarked weekday/sunday lines add nothing to the pending total
    assert ts.summary.total_pending_hrs == pytest.approx(4.5)


def test_other_employees_and_duplicates_are_ignored():
    days = [
        _day(1, DayStatus.PRESENT, "10:00 AM", "2:00 PM"),
        _day(1, DayStatus.PRESENT, "10:00 AM", "6:30 PM"),
        _day(2, DayStatus.PRESENT, "10:00 AM", "6:30 PM", emp="W2"),
    ]
    s = MonthlyAggregator(EngineConfig.default()).aggregate(
        employee_id="W1", department="Worker", month="2024-07", days=days
    ).summary

    assert s.marked_days_count == 1
    assert s.full_working_days_count == 1
    assert s.total_work_hrs == pytest.approx(8.5)


def test_report_pending_policy_counts_leave_shortfall():
    config = EngineConfig.default().with_policies(non_working_policy=NonWorkingDayPolicy.REPORT_PENDING)
    s = MonthlyAggregator(config).aggregate(
        employee_id="W1", department="Worker", month="2024-07", days=[_day(5, DayStatus.LEAVE)]
    ).summary

    assert s.total_pending_hrs == pytest.approx(8.5)
    assert s.total_work_hrs == 0


def test_month_with_26_marked_days_is_finalizable():
    days = [_day(d, DayStatus.PRESENT, "10:00 AM", "6:30 PM") for d in range(1, 27)]
    s = MonthlyAggregator(EngineConfig.default()).aggregate(
        employee_id="W1", department="Worker", month="2024-07", days=days
    ).summary

    assert s.marked_days_count == 26
    assert s.is_finalizable is True
