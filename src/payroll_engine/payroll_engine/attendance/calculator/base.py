from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...common.numbers import round_hours
from ...common.time_text import parse_time
from ...core.engine_config import EngineConfig
from ...core.enums import NON_WORKING_STATUSES, DayStatus, NonWorkingDayPolicy, ShiftType
from ...shifts.model import ShiftProfile
from ..model import DayHours


class WorkHourCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily hours).

    compute_day() holds the shared rules; subclasses only decide how hours worked
    beyond the shift target become overtime.
    """

    def __init__(self, config: EngineConfig):
        self._config = config

    @property
    def config(self) -> EngineConfig:
        return self._config

    @abstractmethod
    def overtime_hours(self, net: float, target: float) -> float:
        raise NotImplementedError

    def compute_day(
        self,
        *,
        check_in: Optional[str],
        lunch_in: Optional[str],
        lunch_out: Optional[str],
        check_out: Optional[str],
        shift_type: ShiftType | str,
        status: DayStatus | str | None = None,
    ) -> DayHours:
        shift = self._config.shift(shift_type)
        target = shift.target_hours

        day_status = DayStatus.parse(status)
        if day_status in NON_WORKING_STATUSES:
            return self._non_working(target)

        ci = parse_time(check_in)
        co = parse_time(check_out)
        if ci is None or co is None:
            return self._no_work(target)

        if shift.shift_type == ShiftType.NIGHT and co <= ci:
            co += 24
        if co <= ci:
            return self._no_work(target)

        total = round_hours(co - ci)
        extra_lunch = self._extra_lunch(shift, lunch_in, lunch_out)
        net = round_hours(max(0.0, total - extra_lunch))

        work = min(net, target)
        pending = round_hours(target - net) if net < target else 0.0
        ot = self.overtime_hours(net, target) if net > target else 0.0

        return DayHours(
            work_hrs=round_hours(work),
            ot_hrs=round_hours(ot),
            pending_hrs=pending,
            actual_work_hrs=net,
        )

    def _extra_lunch(self, shift: ShiftProfile, lunch_in: Optional[str], lunch_out: Optional[str]) -> float:
        """Lunch time beyond the grace window; only that part reduces work time."""
        if not shift.has_lunch:
            return 0.0
        li = parse_time(lunch_in)
        lo = parse_time(lunch_out)
        if li is None or lo is None:
            return 0.0
        if shift.shift_type == ShiftType.NIGHT and lo <= li:
            lo += 24
        if lo <= li:
            return 0.0
        return round_hours(max(0.0, (lo - li) - self._config.lunch_grace_hours))

    def _non_working(self, target: float) -> DayHours:
        if self._config.non_working_policy == NonWorkingDayPolicy.REPORT_PENDING:
            return DayHours(work_hrs=0.0, ot_hrs=0.0, pending_hrs=target)
        return DayHours(work_hrs=0.0, ot_hrs=0.0, pending_hrs=0.0)

    @staticmethod
    def _no_work(target: float) -> DayHours:
        return DayHours(work_hrs=0.0, ot_hrs=0.0, pending_hrs=target)
