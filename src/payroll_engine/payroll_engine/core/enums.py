from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Attendance status stored for one employee on one date."""

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "Half Day"
    LEAVE = "Leave"
    HOLIDAY = "Holiday"
    WEEK_OFF = "Week Off"

    @classmethod
    def parse(cls, value: "str | DayStatus | None") -> "DayStatus | None":
        """Accept stored labels ("Half Day") as well as compact ones ("HalfDay")."""
        if value is None or isinstance(value, DayStatus):
            return value
        key = str(value).replace(" ", "").replace("_", "").lower()
        for member in cls:
            if member.value.replace(" ", "").lower() == key:
                return member
        return None


NON_WORKING_STATUSES = frozenset(
    {DayStatus.LEAVE, DayStatus.HOLIDAY, DayStatus.WEEK_OFF, DayStatus.ABSENT}
)


class ShiftType(str, Enum):
    DAY = "day"
    NIGHT = "night"
    SUNDAY = "sunday"


class Department(str, Enum):
    STAFF = "Staff"
    WORKER = "Worker"
    OTHER_WORKERS = "Other Workers"


class LoanStatus(str, Enum):
    APPROVED = "Approved"
    PENDING = "Pending"
    REJECTED = "Rejected"
    REPAID = "Repaid"


class SkipStatus(str, Enum):
    """Status of a request to skip one month's EMI."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class ApprovalStatus(str, Enum):
    """Monthly attendance approval state; NONE when nothing was submitted."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    NONE = "none"


class PayrollStatus(str, Enum):
    PENDING = "Pending"
    CREDITED = "Credited"


class OvertimeMode(str, Enum):
    """BASIC never credits overtime; SLAB runs extra minutes through the OT slabs."""

    BASIC = "basic"
    SLAB = "slab"


class NonWorkingDayPolicy(str, Enum):
    """How Leave/Holiday/Week Off/Absent days are priced in hours.

    REPORT_PENDING zero-fills work and OT but still reports the shift target as
    pending; ZERO_ALL zero-fills all three figures.
    """

    REPORT_PENDING = "report_pending"
    ZERO_ALL = "zero_all"


class LeavePricingPolicy(str, Enum):
    """DEDUCT prices leave/absent days as a deduction line; PAYABLE pays leave days."""

    DEDUCT = "deduct"
    PAYABLE = "payable"
