from __future__ import annotations

from dataclasses import dataclass

from ..core.engine_config import EngineConfig
from ..core.enums import OvertimeMode
from .calculator.base import WorkHourCalculator
from .calculator.basic_calculator import BasicWorkHourCalculator
from .calculator.slab_calculator import SlabOvertimeCalculator


@dataclass
class WorkHourCalculatorFactory:
    """Factory Pattern: choose the daily calculator for the configured overtime mode."""

    def for_config(self, config: EngineConfig) -> WorkHourCalculator:
        if config.overtime_mode == OvertimeMode.BASIC:
            return BasicWorkHourCalculator(config)
        return SlabOvertimeCalculator(config)
