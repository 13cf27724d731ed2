from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from ..shifts.model import DEFAULT_SHIFTS, ShiftProfile
from . import constants
from .enums import LeavePricingPolicy, NonWorkingDayPolicy, OvertimeMode, ShiftType
from .exceptions import ValidationError


@dataclass(frozen=True)
class EngineConfig:
    """Immutable rule set shared by every calculation call.

    Build it once at startup and pass it explicitly; nothing in the engine reads
    module-level state.
    """

    shifts: Mapping[ShiftType, ShiftProfile] = field(default_factory=lambda: DEFAULT_SHIFTS)
    lunch_grace_hours: float = constants.LUNCH_GRACE_HOURS
    ot_rate_per_hour: float = constants.OT_RATE_PER_HOUR_WORKER
    sunday_allowance_staff: float = constants.SUNDAY_ALLOWANCE_STAFF
    pf_rate: float = constants.PF_RATE
    esi_rate: float = constants.ESI_RATE
    esi_wage_ceiling: float = constants.ESI_WAGE_CEILING
    required_days_long_month: int = constants.REQUIRED_DAYS_LONG_MONTH
    required_days_short_month: int = constants.REQUIRED_DAYS_SHORT_MONTH
    min_marked_days_to_finalize: int = constants.MIN_MARKED_DAYS_TO_FINALIZE
    overtime_mode: OvertimeMode = OvertimeMode.SLAB
    non_working_policy: NonWorkingDayPolicy = NonWorkingDayPolicy.ZERO_ALL
    leave_policy: LeavePricingPolicy = LeavePricingPolicy.DEDUCT

    def __post_init__(self) -> None:
        # Freeze a caller-supplied dict so the config cannot be mutated after construction.
        if not isinstance(self.shifts, MappingProxyType):
            object.__setattr__(self, "shifts", MappingProxyType(dict(self.shifts)))
        missing = [s.value for s in ShiftType if s not in self.shifts]
        if missing:
            raise ValidationError(f"Missing shift profiles: {', '.join(missing)}")

    @classmethod
    def default(cls) -> "EngineConfig":
        return cls()

    def shift(self, shift_type: ShiftType | str) -> ShiftProfile:
        try:
            return self.shifts[ShiftType(shift_type)]
        except ValueError:
            raise ValidationError(f"Unknown shift type: {shift_type!r}")

    def required_days_for_full_month(self, total_days_in_month: int) -> int:
        if total_days_in_month == 31:
            return self.required_days_long_month
        return self.required_days_short_month

    def with_policies(
        self,
        *,
        overtime_mode: OvertimeMode | None = None,
        non_working_policy: NonWorkingDayPolicy | None = None,
        leave_policy: LeavePricingPolicy | None = None,
    ) -> "EngineConfig":
        """Copy of this config with one or more policies switched."""
        return replace(
            self,
            overtime_mode=overtime_mode or self.overtime_mode,
            non_working_policy=non_working_policy or self.non_working_policy,
            leave_policy=leave_policy or self.leave_policy,
        )


def engine_config_from_settings(settings: Any) -> EngineConfig:
    """Build the engine config from a settings module (see config/*.py)."""

    def _get(name: str, default):
        value = getattr(settings, name, None)
        return default if value in (None, "") else value

    try:
        return EngineConfig(
            ot_rate_per_hour=float(_get("OT_RATE_PER_HOUR", constants.OT_RATE_PER_HOUR_WORKER)),
            sunday_allowance_staff=float(_get("SUNDAY_ALLOWANCE_STAFF", constants.SUNDAY_ALLOWANCE_STAFF)),
            overtime_mode=OvertimeMode(_get("OVERTIME_MODE", OvertimeMode.SLAB.value)),
            non_working_policy=NonWorkingDayPolicy(_get("NON_WORKING_POLICY", NonWorkingDayPolicy.ZERO_ALL.value)),
            leave_policy=LeavePricingPolicy(_get("LEAVE_POLICY", LeavePricingPolicy.DEDUCT.value)),
        )
    except ValueError as e:
        raise ValidationError(f"Invalid engine settings: {e}")
