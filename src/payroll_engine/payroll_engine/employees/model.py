from __future__ import annotations

from dataclasses import dataclass, field

from ..common.numbers import finite_or_zero
from ..core.enums import Department


@dataclass(frozen=True)
class SalaryStructure:
    """Monthly salary components as configured for an employee (read-only input)."""

    basic: float = 0.0
    hra: float = 0.0
    conveyance: float = 0.0
    other_allowance: float = 0.0
    special_allowance: float = 0.0
    additional_special_allowance: float = 0.0
    gross_monthly: float = 0.0

    def components_total(self) -> float:
        return (
            finite_or_zero(self.basic)
            + finite_or_zero(self.hra)
            + finite_or_zero(self.conveyance)
            + finite_or_zero(self.other_allowance)
            + finite_or_zero(self.special_allowance)
            + finite_or_zero(self.additional_special_allowance)
        )

    @property
    def monthly_salary(self) -> float:
        """grossMonthly when set, else the sum of the components, else 0."""
        gross = finite_or_zero(self.gross_monthly)
        if gross > 0:
            return gross
        total = self.components_total()
        return total if total > 0 else 0.0


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee directory entry used by the payroll engine."""

    employee_id: str
    name: str
    department: Department | str
    salary: SalaryStructure = field(default_factory=SalaryStructure)
    pf_applicable: bool = False
    esi_applicable: bool = False
    is_active: bool = True

    @property
    def department_name(self) -> str:
        if isinstance(self.department, Department):
            return self.department.value
        return str(self.department or "")

    @property
    def is_staff(self) -> bool:
        return self.department_name == Department.STAFF.value
