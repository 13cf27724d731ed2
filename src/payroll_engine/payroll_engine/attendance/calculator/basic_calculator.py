from __future__ import annotations

from .base import WorkHourCalculator


class BasicWorkHourCalculator(WorkHourCalculator):
    """Basic rule: hours beyond the target are capped and never credited as OT."""

    def overtime_hours(self, net: float, target: float) -> float:
        return 0.0
