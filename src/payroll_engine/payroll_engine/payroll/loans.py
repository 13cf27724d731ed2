from __future__ import annotations

from typing import Iterable

from ..common.numbers import finite_or_zero, round_money
from ..core.enums import LoanStatus, SkipStatus
from .model import LoanRecord

_SUPPRESSING_SKIPS = frozenset({SkipStatus.APPROVED, SkipStatus.PENDING})


def emi_skipped(loan: LoanRecord, month: str) -> bool:
    """A Pending skip request suppresses the EMI just like an Approved one."""
    request = loan.skip_emi_requests.get(month)
    return request is not None and request.status in _SUPPRESSING_SKIPS


def loan_deduction_for_month(loans: Iterable[LoanRecord], employee_id: str, month: str) -> float:
    total = 0.0
    for loan in loans:
        if loan.employee_id != employee_id or loan.status != LoanStatus.APPROVED:
            continue
        if emi_skipped(loan, month):
            continue
        total += finite_or_zero(loan.emi_amount)
    return round_money(total)
