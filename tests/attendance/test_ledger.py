from datetime import date

from src.payroll_engine.payroll_engine.attendance.ledger import AttendanceLedger
from src.payroll_engine.payroll_engine.attendance.model import AttendanceDay
from src.payroll_engine.payroll_engine.core.enums import DayStatus


def _day(emp, d, status=DayStatus.PRESENT):
    return AttendanceDay(employee_id=emp, work_date=d, status=status)


def test_put_replaces_record_for_same_key():
    ledger = AttendanceLedger()
    first = _day("E1", date(2024, 7, 1))
    second = _day("E1", date(2024, 7, 1), DayStatus.HALF_DAY)

    assert ledger.put(first) is None
    assert ledger.put(second) == first
    assert len(ledger) == 1
    assert ledger.get("E1", date(2024, 7, 1)).status == DayStatus.HALF_DAY


def test_for_employee_month_is_sorted_and_filtered():
    ledger = AttendanceLedger(
        [
            _day("E1", date(2024, 7, 3)),
            _day("E1", date(2024, 7, 1)),
            _day("E2", date(2024, 7, 2)),
            _day("E1", date(2024, 8, 1)),
        ]
    )

    days = ledger.for_employee_month("E1", 2024, 7)

    assert [d.work_date.day for d in days] == [1, 3]


def test_remove_returns_removed_record():
    ledger = AttendanceLedger([_day("E1", date(2024, 7, 1))])

    assert ledger.remove("E1", date(2024, 7, 1)) is not None
    assert ledger.remove("E1", date(2024, 7, 1)) is None
    assert len(ledger) == 0
