from __future__ import annotations

from ..ot_slabs import round_ot
from .base import WorkHourCalculator


class SlabOvertimeCalculator(WorkHourCalculator):
    """Hours beyond the target are credited through the OT slabs."""

    def overtime_hours(self, net: float, target: float) -> float:
        # Inputs have minute resolution; trim float noise such as 44.9999 before slabbing.
        extra_minutes = round((net - target) * 60, 2)
        return round_ot(extra_minutes) / 60
