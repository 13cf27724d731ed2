from __future__ import annotations

from typing import Optional

from ..core.engine_config import EngineConfig
from ..core.enums import DayStatus, ShiftType
from .factory import WorkHourCalculatorFactory
from .model import DayHours


def compute_day(
    check_in: Optional[str],
    lunch_in: Optional[str],
    lunch_out: Optional[str],
    check_out: Optional[str],
    shift_type: ShiftType | str,
    status: DayStatus | str | None = None,
    *,
    config: EngineConfig,
) -> DayHours:
    """Work/OT/pending hours for one day under ``config``'s policies."""
    calculator = WorkHourCalculatorFactory().for_config(config)
    return calculator.compute_day(
        check_in=check_in,
        lunch_in=lunch_in,
        lunch_out=lunch_out,
        check_out=check_out,
        shift_type=shift_type,
        status=status,
    )
