from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import ApprovalStatus
from .model import LoanRecord, PayrollRow


class LoanRepository(Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[LoanRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[LoanRecord]:
        raise NotImplementedError


class ApprovalRepository(Protocol):
    def status_for(self, *, employee_id: str, month: str) -> ApprovalStatus:
        """Monthly attendance approval; ApprovalStatus.NONE when nothing was submitted."""

        raise NotImplementedError


class PayrollRepository(Protocol):
    def credited_employee_ids(self, month: str) -> set[str]:
        raise NotImplementedError

    def mark_credited(self, *, employee_id: str, month: str) -> bool:
        """Conditional write: True only for the call that performed the credit."""

        raise NotImplementedError

    def get_loan_override(self, *, employee_id: str, month: str) -> Optional[float]:
        raise NotImplementedError

    def list_loan_overrides(self, month: str) -> Mapping[str, float]:
        raise NotImplementedError

    def set_loan_override(self, *, employee_id: str, month: str, amount: float) -> None:
        raise NotImplementedError

    def save_row(self, row: PayrollRow) -> None:
        raise NotImplementedError
