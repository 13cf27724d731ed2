from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from ..common.datetime_utils import is_sunday
from ..core.enums import ShiftType


@dataclass(frozen=True)
class ShiftProfile:
    """Shift template expressed in decimal hours.

    end_hour may exceed 24 when the shift crosses midnight (night shift ends 24.5 = 00:30).
    """

    shift_type: ShiftType
    name: str
    start_hour: float
    end_hour: float
    target_hours: float
    lunch_start: Optional[float] = None
    lunch_end: Optional[float] = None

    @property
    def has_lunch(self) -> bool:
        return self.lunch_start is not None and self.lunch_end is not None


DAY_SHIFT = ShiftProfile(
    shift_type=ShiftType.DAY,
    name="Day Shift",
    start_hour=10.0,
    end_hour=18.5,
    lunch_start=13.0,
    lunch_end=13.5,
    target_hours=8.5,
)

NIGHT_SHIFT = ShiftProfile(
    shift_type=ShiftType.NIGHT,
    name="Night Shift",
    start_hour=16.0,
    end_hour=24.5,
    lunch_start=20.0,
    lunch_end=20.5,
    target_hours=8.5,
)

SUNDAY_SHIFT = ShiftProfile(
    shift_type=ShiftType.SUNDAY,
    name="Sunday Shift",
    start_hour=9.0,
    end_hour=13.0,
    target_hours=4.0,
)

DEFAULT_SHIFTS: Mapping[ShiftType, ShiftProfile] = MappingProxyType(
    {
        ShiftType.DAY: DAY_SHIFT,
        ShiftType.NIGHT: NIGHT_SHIFT,
        ShiftType.SUNDAY: SUNDAY_SHIFT,
    }
)


def default_shift_type(work_date: date) -> ShiftType:
    """Shift assumed when a record does not name one."""
    return ShiftType.SUNDAY if is_sunday(work_date) else ShiftType.DAY
