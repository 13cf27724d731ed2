from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...common.numbers import finite_or_zero, round_money
from ...core.engine_config import EngineConfig
from ...core.enums import LeavePricingPolicy
from ...employees.model import Employee
from ..model import AttendanceTally


@dataclass(frozen=True)
class PayFigures:
    """Monetary half of a payroll row; every value is rounded to 2 decimals."""

    monthly_salary: float
    per_day_rate: float
    leave_days: int
    payable_days: float
    lop_days: float
    pd_pay: float
    hd_pay: float
    ld_pay: float
    holiday_pay: float
    additional_sp_allowance: float
    basic: float
    hra: float
    conveyance: float
    other_allowance: float
    special_allowance: float
    total_gross_earnings: float
    pf: float
    esi: float
    loan_deduction: float
    total_deductions: float
    total_earnings: float
    net_payable: float


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for leave pricing).

    Proration, statutory deductions and the net are shared; subclasses only
    decide which days count as leave and whether leave is earned or deducted.
    """

    policy: LeavePricingPolicy

    def __init__(self, config: EngineConfig):
        self._config = config

    @abstractmethod
    def priced_leave_days(self, tally: AttendanceTally) -> int:
        raise NotImplementedError

    @abstractmethod
    def payable_days(self, tally: AttendanceTally, leave_days: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def leave_earnings(self, ld_pay: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def leave_deduction(self, ld_pay: float) -> float:
        raise NotImplementedError

    def price(self, employee: Employee, tally: AttendanceTally, *, loan_deduction: float) -> PayFigures:
        salary = employee.salary
        monthly_salary = round_money(salary.monthly_salary)
        per_day_rate = round_money(monthly_salary / tally.total_days) if tally.total_days > 0 else 0.0

        leave_days = self.priced_leave_days(tally)
        payable_days = self.payable_days(tally, leave_days)

        pd_pay = round_money(tally.present_days * per_day_rate)
        hd_pay = round_money(tally.half_days * (per_day_rate / 2))
        ld_pay = round_money(leave_days * per_day_rate)
        holiday_pay = round_money(tally.holiday_count * per_day_rate)
        base_earnings = round_money(pd_pay + hd_pay + holiday_pay + self.leave_earnings(ld_pay))

        ratio = base_earnings / monthly_salary if base_earnings > 0 and monthly_salary > 0 else 0.0
        basic = round_money(finite_or_zero(salary.basic) * ratio)
        hra = round_money(finite_or_zero(salary.hra) * ratio)
        conveyance = round_money(finite_or_zero(salary.conveyance) * ratio)
        other_allowance = round_money(finite_or_zero(salary.other_allowance) * ratio)
        special_allowance = round_money(finite_or_zero(salary.special_allowance) * ratio)
        additional = round_money(salary.additional_special_allowance)

        gross = round_money(base_earnings + additional)
        pf = round_money((basic + conveyance) * self._config.pf_rate) if employee.pf_applicable else 0.0
        esi = 0.0
        if employee.esi_applicable and monthly_salary <= self._config.esi_wage_ceiling:
            esi = round_money(gross * self._config.esi_rate)

        loan = round_money(loan_deduction)
        total_deductions = round_money(pf + esi + loan + self.leave_deduction(ld_pay))
        return PayFigures(
            monthly_salary=monthly_salary,
            per_day_rate=per_day_rate,
            leave_days=leave_days,
            payable_days=payable_days,
            lop_days=round_money(tally.total_days - payable_days),
            pd_pay=pd_pay,
            hd_pay=hd_pay,
            ld_pay=ld_pay,
            holiday_pay=holiday_pay,
            additional_sp_allowance=additional,
            basic=basic,
            hra=hra,
            conveyance=conveyance,
            other_allowance=other_allowance,
            special_allowance=special_allowance,
            total_gross_earnings=gross,
            pf=pf,
            esi=esi,
            loan_deduction=loan,
            total_deductions=total_deductions,
            total_earnings=gross,
            net_payable=round_money(gross - total_deductions),
        )
