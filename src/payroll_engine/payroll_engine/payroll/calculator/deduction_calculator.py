from __future__ import annotations

from ...core.enums import LeavePricingPolicy
from ..model import AttendanceTally
from .base import PayrollCalculator


class LeaveDeductionCalculator(PayrollCalculator):
    """Leave and Absent days are priced at the day rate and deducted."""

    policy = LeavePricingPolicy.DEDUCT

    def priced_leave_days(self, tally: AttendanceTally) -> int:
        return tally.leave_days + tally.absent_days

    def payable_days(self, tally: AttendanceTally, leave_days: int) -> float:
        return tally.present_days + tally.half_days * 0.5

    def leave_earnings(self, ld_pay: float) -> float:
        return 0.0

    def leave_deduction(self, ld_pay: float) -> float:
        return ld_pay
