import pytest

from src.payroll_engine.payroll_engine.attendance.calculator.basic_calculator import BasicWorkHourCalculator
from src.payroll_engine.payroll_engine.attendance.calculator.slab_calculator import SlabOvertimeCalculator
from src.payroll_engine.payroll_engine.attendance.factory import WorkHourCalculatorFactory
from src.payroll_engine.payroll_engine.attendance.hours import compute_day
from src.payroll_engine.payroll_engine.core.engine_config import EngineConfig
from src.payroll_engine.payroll_engine.core.enums import NonWorkingDayPolicy, OvertimeMode, ShiftType
from src.payroll_engine.payroll_engine.core.exceptions import ValidationError


CONFIG = EngineConfig.default()


def test_night_shift_crossing_midnight():
    hours = compute_day("11:50 PM", "", "", "7:30 AM", ShiftType.NIGHT, config=CONFIG)

    assert hours.actual_work_hrs == pytest.approx(7.6667)
    assert hours.work_hrs == pytest.approx(7.6667)
    assert hours.pending_hrs == pytest.approx(0.8333)
    assert hours.ot_hrs == 0


def test_day_shift_only_lunch_beyond_grace_is_deducted():
    # 75 minute lunch: 45 minutes over the 30 minute grace.
    hours = compute_day("10:00 AM", "1:00 PM", "2:15 PM", "7:00 PM", ShiftType.DAY, config=CONFIG)

    assert hours.actual_work_hrs == pytest.approx(9.0 - 0.75)
    assert hours.work_hrs == pytest.approx(8.25)
    assert hours.pending_hrs == pytest.approx(0.25)


def test_lunch_within_grace_costs_nothing():
    hours = compute_day("10:00 AM", "1:00 PM", "1:30 PM", "6:30 PM", ShiftType.DAY, config=CONFIG)

    assert hours.work_hrs == pytest.approx(8.5)
    assert hours.pending_hrs == 0


def test_night_lunch_crossing_midnight():
    hours = compute_day("4:00 PM", "11:50 PM", "12:40 AM", "12:30 AM", ShiftType.NIGHT, config=CONFIG)

    assert hours.actual_work_hrs == pytest.approx(8.1667)
    assert hours.pending_hrs == pytest.approx(0.3333)


def test_sunday_shift_has_no_lunch_window():
    hours = compute_day("9:00 AM", "10:00 AM", "11:30 AM", "1:00 PM", ShiftType.SUNDAY, config=CONFIG)

    assert hours.work_hrs == pytest.approx(4.0)
    assert hours.pending_hrs == 0


@pytest.mark.parametrize(
    "check_out, ot",
    [
        ("6:50 PM", 0.0),
        ("7:15 PM", 1.0),
        ("7:30 PM", 1.0),
        ("8:00 PM", 1.5),
    ],
)
def test_slab_calculator_credits_overtime(check_out, ot):
    hours = compute_day("10:00 AM", "", "", check_out, ShiftType.DAY, config=CONFIG)

    assert hours.work_hrs == pytest.approx(8.5)
    assert hours.pending_hrs == 0
    assert hours.ot_hrs == pytest.approx(ot)


def test_basic_calculator_never_credits_overtime():
    config = CONFIG.with_policies(overtime_mode=OvertimeMode.BASIC)
    hours = compute_day("10:00 AM", "", "", "9:00 PM", ShiftType.DAY, config=config)

    assert hours.work_hrs == pytest.approx(8.5)
    assert hours.ot_hrs == 0
    assert hours.actual_work_hrs == pytest.approx(11.0)


def test_factory_selects_calculator_for_overtime_mode():
    factory = WorkHourCalculatorFactory()

    assert isinstance(factory.for_config(CONFIG), SlabOvertimeCalculator)
    assert isinstance(
        factory.for_config(CONFIG.with_policies(overtime_mode=OvertimeMode.BASIC)),
        BasicWorkHourCalculator,
    )


@pytest.mark.parametrize("status", ["Leave", "Holiday", "Week Off", "WeekOff", "Absent"])
def test_non_working_days_zero_all_by_default(status):
    hours = compute_day("10:00 AM", "", "", "6:30 PM", ShiftType.DAY, status, config=CONFIG)

    assert (hours.work_hrs, hours.ot_hrs, hours.pending_hrs) == (0, 0, 0)


def test_non_working_days_can_report_pending():
    config = CONFIG.with_policies(non_working_policy=NonWorkingDayPolicy.REPORT_PENDING)
    hours = compute_day("", "", "", "", ShiftType.DAY, "Leave", config=config)

    assert (hours.work_hrs, hours.ot_hrs) == (0, 0)
    assert hours.pending_hrs == pytest.approx(8.5)


@pytest.mark.parametrize(
    "check_in, check_out",
    [
        ("10:00 AM", ""),
        ("", "6:30 PM"),
        ("garbage", "6:30 PM"),
        ("6:00 PM", "10:00 AM"),
    ],
)
def test_missing_or_inverted_times_mean_no_work(check_in, check_out):
    hours = compute_day(check_in, "", "", check_out, ShiftType.DAY, "Present", config=CONFIG)

    assert hours.work_hrs == 0
    assert hours.ot_hrs == 0
    assert hours.pending_hrs == pytest.approx(8.5)


@pytest.mark.parametrize("check_out", ["11:00 AM", "1:45 PM", "3:10 PM", "5:59 PM", "6:30 PM"])
def test_work_plus_pending_equals_target_when_not_over(check_out):
    hours = compute_day("10:00 AM", "", "", check_out, ShiftType.DAY, config=CONFIG)

    assert hours.work_hrs <= 8.5
    assert hours.work_hrs + hours.pending_hrs == pytest.approx(8.5)


def test_unknown_shift_type_is_rejected():
    with pytest.raises(ValidationError):
        compute_day("10:00 AM", "", "", "6:30 PM", "graveyard", config=CONFIG)
