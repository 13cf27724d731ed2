from datetime import date

from src.payroll_engine.payroll_engine.holidays.model import Holiday, applicable_holiday_count, holiday_on

HOLIDAYS = [
    Holiday(holiday_date=date(2024, 8, 15), name="Independence Day"),
    Holiday(holiday_date=date(2024, 8, 19), name="Raksha Bandhan", departments=("Staff",)),
    Holiday(holiday_date=date(2024, 9, 7), name="Ganesh Chaturthi", departments=("Worker", "Other Workers")),
]


def test_count_respects_month_and_department():
    assert applicable_holiday_count(HOLIDAYS, "Staff", year=2024, month=8) == 2
    assert applicable_holiday_count(HOLIDAYS, "Worker", year=2024, month=8) == 1
    assert applicable_holiday_count(HOLIDAYS, "Staff", year=2024, month=9) == 0
    assert applicable_holiday_count(HOLIDAYS, "Other Workers", year=2024, month=9) == 1


def test_holiday_on_date():
    assert holiday_on(HOLIDAYS, date(2024, 8, 19), "Staff").name == "Raksha Bandhan"
    assert holiday_on(HOLIDAYS, date(2024, 8, 19), "Worker") is None
