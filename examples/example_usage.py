"""Example: pricing a month with the engine directly (no Flask, no database)."""

from datetime import date

from src.payroll_engine.payroll_engine.attendance.hours import compute_day
from src.payroll_engine.payroll_engine.attendance.model import AttendanceDay
from src.payroll_engine.payroll_engine.common.datetime_utils import iter_month_dates
from src.payroll_engine.payroll_engine.common.time_text import format_hours
from src.payroll_engine.payroll_engine.core.engine_config import EngineConfig
from src.payroll_engine.payroll_engine.core.enums import DayStatus, Department, ShiftType
from src.payroll_engine.payroll_engine.employees.model import Employee, SalaryStructure
from src.payroll_engine.payroll_engine.payroll.engine import compute_payroll_row
from src.payroll_engine.payroll_engine.timesheet.aggregator import MonthlyAggregator


def main():
    config = EngineConfig.default()

    hours = compute_day("11:50 PM", "", "", "7:30 AM", ShiftType.NIGHT, config=config)
    print("night shift:", format_hours(hours.actual_work_hrs), "worked,", format_hours(hours.pending_hrs), "pending")

    employee = Employee(
        employee_id="E001",
        name="Asha",
        department=Department.WORKER,
        salary=SalaryStructure(basic=10000, hra=4000, conveyance=2000, special_allowance=4000),
        pf_applicable=True,
        esi_applicable=True,
    )
    days = [
        AttendanceDay(
            employee_id="E001",
            work_date=d,
            status=DayStatus.PRESENT,
            check_in="10:00 AM" if d.weekday() != 6 else "9:00 AM",
            check_out="6:30 PM" if d.weekday() != 6 else "1:00 PM",
        )
        for d in iter_month_dates("2024-07")
        if d < date(2024, 7, 25)
    ]

    timesheet = MonthlyAggregator(config).aggregate(
        employee_id="E001", department=employee.department_name, month="2024-07", days=days
    )
    print("summary:", timesheet.summary)

    row = compute_payroll_row(employee, days, [], [], month="2024-07", config=config)
    print("net payable:", row.net_payable)


if __name__ == "__main__":
    main()
