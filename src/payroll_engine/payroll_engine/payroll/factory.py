from __future__ import annotations

from dataclasses import dataclass

from ..core.engine_config import EngineConfig
from ..core.enums import LeavePricingPolicy
from .calculator.base import PayrollCalculator
from .calculator.deduction_calculator import LeaveDeductionCalculator
from .calculator.payable_leave_calculator import PayableLeaveCalculator


@dataclass
class PayrollCalculatorFactory:
    """Simple Factory: selects the leave pricing strategy."""

    def for_config(self, config: EngineConfig) -> PayrollCalculator:
        if config.leave_policy == LeavePricingPolicy.PAYABLE:
            return PayableLeaveCalculator(config)
        return LeaveDeductionCalculator(config)
