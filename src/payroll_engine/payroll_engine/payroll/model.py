from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from ..core.enums import ApprovalStatus, LeavePricingPolicy, LoanStatus, PayrollStatus, SkipStatus


@dataclass(frozen=True)
class SkipEmiRequest:
    month: str
    status: SkipStatus
    reason: str = ""


@dataclass(frozen=True)
class LoanRecord:
    """Loan registry entry; skip_emi_requests is keyed by "YYYY-MM"."""

    loan_id: str
    employee_id: str
    amount: float
    emi_amount: float
    emi_months: int
    status: LoanStatus
    skip_emi_requests: Mapping[str, SkipEmiRequest] = field(default_factory=dict)


@dataclass(frozen=True)
class AttendanceTally:
    """Day counts feeding the proration for one employee/month."""

    total_days: int
    present_days: int
    actual_present_days: int
    half_days: int
    leave_days: int
    absent_days: int
    holiday_count: int
    total_pending_hours: float


@dataclass(frozen=True)
class PayrollRow:
    """Derived payroll line for one employee and month.

    Only the loan deduction may be overridden, and only through
    ``apply_loan_override`` which reruns the pricing.
    """

    employee_id: str
    name: str
    department: str
    month: str
    monthly_salary: float
    present_days: int
    actual_present_days: int
    half_days: int
    leave_days: int
    total_days: int
    payable_days: float
    lop_days: float
    per_day_rate: float
    pd_pay: float
    hd_pay: float
    ld_pay: float
    ha_days: int
    holiday_pay: float
    loan_deduction: float
    loan_overridden: bool
    additional_sp_allowance: float
    basic: float
    hra: float
    conveyance: float
    other_allowance: float
    special_allowance: float
    total_gross_earnings: float
    pf: float
    esi: float
    total_deductions: float
    total_earnings: float
    net_payable: float
    status: PayrollStatus
    attendance_status: ApprovalStatus
    total_pending_hours: float
    leave_policy: LeavePricingPolicy

    @property
    def is_credited(self) -> bool:
        return self.status == PayrollStatus.CREDITED


@dataclass(frozen=True)
class PayrollSheet:
    month: str
    rows: Sequence[PayrollRow]
    total_gross: float
    total_deductions: float
    total_net: float
    credited_count: int
