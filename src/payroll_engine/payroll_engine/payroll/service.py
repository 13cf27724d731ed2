from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceDay
from ..attendance.repository import AttendanceRepository
from ..common.numbers import round_money
from ..core.engine_config import EngineConfig
from ..core.enums import PayrollStatus
from ..core.exceptions import AlreadyCreditedError, CreditingError, NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..holidays.model import Holiday
from ..holidays.repository import HolidayRepository
from .engine import apply_loan_override, compute_payroll_row, credit_row
from .factory import PayrollCalculatorFactory
from .model import LoanRecord, PayrollRow, PayrollSheet
from .repository import ApprovalRepository, LoanRepository, PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        holidays: HolidayRepository,
        loans: LoanRepository,
        approvals: ApprovalRepository,
        payroll: PayrollRepository,
        *,
        config: EngineConfig,
        calculator_factory: Optional[PayrollCalculatorFactory] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._holidays = holidays
        self._loans = loans
        self._approvals = approvals
        self._payroll = payroll
        self._config = config
        self._calculator_factory = calculator_factory or PayrollCalculatorFactory()

    def _row_for(
        self,
        employee: Employee,
        *,
        month: str,
        days: Iterable[AttendanceDay],
        loans: Iterable[LoanRecord],
        holidays: Sequence[Holiday],
        credited: bool,
        override: Optional[float],
    ) -> PayrollRow:
        return compute_payroll_row(
            employee,
            days,
            loans,
            holidays,
            month=month,
            config=self._config,
            override_loan_deduction=override,
            attendance_status=self._approvals.status_for(employee_id=employee.employee_id, month=month),
            status=PayrollStatus.CREDITED if credited else PayrollStatus.PENDING,
            calculator_factory=self._calculator_factory,
        )

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def get_row(self, *, employee_id: str, month: str) -> PayrollRow:
        employee = self._require_employee(employee_id)
        return self._row_for(
            employee,
            month=month,
            days=self._attendance.list_month(month=month, employee_id=employee_id),
            loans=self._loans.list_for_employee(employee_id),
            holidays=self._holidays.list_for_month(month),
            credited=employee_id in self._payroll.credited_employee_ids(month),
            override=self._payroll.get_loan_override(employee_id=employee_id, month=month),
        )

    def build_month(self, month: str) -> PayrollSheet:
        """Rows for every active employee, sorted by employee id, plus sheet totals."""
        days = self._attendance.list_month(month=month)
        loans = self._loans.list_all()
        holidays = self._holidays.list_for_month(month)
        credited_ids = self._payroll.credited_employee_ids(month)
        overrides: Mapping[str, float] = self._payroll.list_loan_overrides(month)

        by_employee: dict[str, list[AttendanceDay]] = {}
        for d in days:
            by_employee.setdefault(d.employee_id, []).append(d)

        rows: list[PayrollRow] = []
        for employee in sorted(self._employees.list_active(), key=lambda e: e.employee_id):
            row = self._row_for(
                employee,
                month=month,
                days=by_employee.get(employee.employee_id, []),
                loans=loans,
                holidays=holidays,
                credited=employee.employee_id in credited_ids,
                override=overrides.get(employee.employee_id),
            )
            self._payroll.save_row(row)
            rows.append(row)

        sheet = PayrollSheet(
            month=month,
            rows=rows,
            total_gross=round_money(sum(r.total_gross_earnings for r in rows)),
            total_deductions=round_money(sum(r.total_deductions for r in rows)),
            total_net=round_money(sum(r.net_payable for r in rows)),
            credited_count=sum(1 for r in rows if r.is_credited),
        )
        logger.info("Payroll %s built: %d rows, net %.2f", month, len(rows), sheet.total_net)
        return sheet

    def set_loan_deduction(self, *, employee_id: str, month: str, amount) -> PayrollRow:
        employee = self._require_employee(employee_id)
        row = apply_loan_override(self.get_row(employee_id=employee_id, month=month), employee, amount, self._config)
        self._payroll.set_loan_override(employee_id=employee_id, month=month, amount=row.loan_deduction)
        self._payroll.save_row(row)
        logger.info("Loan deduction for %s in %s set to %.2f", employee_id, month, row.loan_deduction)
        return row

    def credit(self, *, employee_id: str, month: str) -> PayrollRow:
        try:
            credited = credit_row(self.get_row(employee_id=employee_id, month=month))
            if not self._payroll.mark_credited(employee_id=employee_id, month=month):
                # Another request credited the row between the read and the write.
                raise AlreadyCreditedError(f"Payroll for {employee_id} in {month} is already credited")
        except CreditingError as e:
            logger.warning("Credit rejected for %s in %s: %s", employee_id, month, e)
            raise
        self._payroll.save_row(credited)
        logger.info("Payroll credited for %s in %s (net %.2f)", employee_id, month, credited.net_payable)
        return credited
