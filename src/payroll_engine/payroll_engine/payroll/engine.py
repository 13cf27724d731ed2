from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Optional

from ..attendance.model import AttendanceDay
from ..common.datetime_utils import days_in_month, parse_month_key
from ..common.numbers import finite_or_zero, round_hours
from ..common.validators import require_amount
from ..core.engine_config import EngineConfig
from ..core.enums import ApprovalStatus, DayStatus, PayrollStatus
from ..core.exceptions import AlreadyCreditedError, AttendanceNotAcceptedError
from ..employees.model import Employee
from ..holidays.model import Holiday, applicable_holiday_count
from .calculator.base import PayFigures
from .factory import PayrollCalculatorFactory
from .loans import loan_deduction_for_month
from .model import AttendanceTally, LoanRecord, PayrollRow


def tally_attendance(
    employee: Employee,
    month_attendance: Iterable[AttendanceDay],
    holidays: Iterable[Holiday],
    *,
    month: str,
    config: EngineConfig,
) -> AttendanceTally:
    """Count the month's days and apply the full-attendance snap.

    Once actual present days reach the required days (27 in a 31-day month,
    otherwise 26) less the applicable holidays, present days are paid as the
    whole month.
    """
    year, mon = parse_month_key(month)
    total_days = days_in_month(month)

    present = half = leave = absent = 0
    pending = 0.0
    for day in month_attendance:
        if day.employee_id != employee.employee_id:
            continue
        if day.status == DayStatus.PRESENT:
            present += 1
        elif day.status == DayStatus.HALF_DAY:
            half += 1
        elif day.status == DayStatus.LEAVE:
            leave += 1
        elif day.status == DayStatus.ABSENT:
            absent += 1
        hrs = finite_or_zero(day.pending_hrs)
        if hrs > 0:
            pending += hrs

    holiday_count = applicable_holiday_count(holidays, employee.department_name, year=year, month=mon)
    adjusted_required = config.required_days_for_full_month(total_days) - holiday_count
    return AttendanceTally(
        total_days=total_days,
        present_days=total_days if present >= adjusted_required else present,
        actual_present_days=present,
        half_days=half,
        leave_days=leave,
        absent_days=absent,
        holiday_count=holiday_count,
        total_pending_hours=round_hours(pending),
    )


def _build_row(
    employee: Employee,
    tally: AttendanceTally,
    figures: PayFigures,
    *,
    month: str,
    config: EngineConfig,
    loan_overridden: bool,
    attendance_status: ApprovalStatus,
    status: PayrollStatus,
) -> PayrollRow:
    return PayrollRow(
        employee_id=employee.employee_id,
        name=(employee.name or "").strip() or "-",
        department=employee.department_name or "-",
        month=month,
        monthly_salary=figures.monthly_salary,
        present_days=tally.present_days,
        actual_present_days=tally.actual_present_days,
        half_days=tally.half_days,
        leave_days=figures.leave_days,
        total_days=tally.total_days,
        payable_days=figures.payable_days,
        lop_days=figures.lop_days,
        per_day_rate=figures.per_day_rate,
        pd_pay=figures.pd_pay,
        hd_pay=figures.hd_pay,
        ld_pay=figures.ld_pay,
        ha_days=tally.holiday_count,
        holiday_pay=figures.holiday_pay,
        loan_deduction=figures.loan_deduction,
        loan_overridden=loan_overridden,
        additional_sp_allowance=figures.additional_sp_allowance,
        basic=figures.basic,
        hra=figures.hra,
        conveyance=figures.conveyance,
        other_allowance=figures.other_allowance,
        special_allowance=figures.special_allowance,
        total_gross_earnings=figures.total_gross_earnings,
        pf=figures.pf,
        esi=figures.esi,
        total_deductions=figures.total_deductions,
        total_earnings=figures.total_earnings,
        net_payable=figures.net_payable,
        status=status,
        attendance_status=attendance_status,
        total_pending_hours=tally.total_pending_hours,
        leave_policy=config.leave_policy,
    )


def compute_payroll_row(
    employee: Employee,
    month_attendance: Iterable[AttendanceDay],
    loans: Iterable[LoanRecord],
    holidays: Iterable[Holiday],
    *,
    month: str,
    config: EngineConfig,
    override_loan_deduction: Optional[Any] = None,
    attendance_status: ApprovalStatus = ApprovalStatus.NONE,
    status: PayrollStatus = PayrollStatus.PENDING,
    calculator_factory: PayrollCalculatorFactory | None = None,
) -> PayrollRow:
    """Price one employee's month. Pure: identical inputs give an identical row."""
    tally = tally_attendance(employee, month_attendance, holidays, month=month, config=config)

    if override_loan_deduction is None:
        loan = loan_deduction_for_month(loans, employee.employee_id, month)
    else:
        loan = require_amount(override_loan_deduction, "loan_deduction")

    calculator = (calculator_factory or PayrollCalculatorFactory()).for_config(config)
    figures = calculator.price(employee, tally, loan_deduction=loan)
    return _build_row(
        employee,
        tally,
        figures,
        month=month,
        config=config,
        loan_overridden=override_loan_deduction is not None,
        attendance_status=attendance_status,
        status=status,
    )


def apply_loan_override(row: PayrollRow, employee: Employee, amount: Any, config: EngineConfig) -> PayrollRow:
    """Replace the loan deduction and rerun proration, deductions and net.

    The row's own leave policy is kept so an override never reprices leave.
    """
    if row.is_credited:
        raise AlreadyCreditedError(f"Payroll for {row.employee_id} in {row.month} is already credited")

    loan = require_amount(amount, "loan_deduction")
    row_config = config.with_policies(leave_policy=row.leave_policy)
    tally = AttendanceTally(
        total_days=row.total_days,
        present_days=row.present_days,
        actual_present_days=row.actual_present_days,
        half_days=row.half_days,
        leave_days=row.leave_days,
        absent_days=0,
        holiday_count=row.ha_days,
        total_pending_hours=row.total_pending_hours,
    )
    figures = PayrollCalculatorFactory().for_config(row_config).price(employee, tally, loan_deduction=loan)
    return _build_row(
        employee,
        tally,
        figures,
        month=row.month,
        config=row_config,
        loan_overridden=True,
        attendance_status=row.attendance_status,
        status=row.status,
    )


def credit_row(row: PayrollRow) -> PayrollRow:
    """Pending -> Credited. One-way; a second credit is rejected, not repeated."""
    if row.is_credited:
        raise AlreadyCreditedError(f"Payroll for {row.employee_id} in {row.month} is already credited")
    if row.attendance_status != ApprovalStatus.ACCEPTED:
        raise AttendanceNotAcceptedError(
            f"Attendance for {row.employee_id} in {row.month} is {row.attendance_status.value}, not accepted"
        )
    return replace(row, status=PayrollStatus.CREDITED)
