from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceDay, LeaveRange


class AttendanceRepository(Protocol):
    def get_day(self, employee_id: str, work_date: date) -> Optional[AttendanceDay]:
        raise NotImplementedError

    def list_month(self, *, month: str, employee_id: Optional[str] = None) -> Sequence[AttendanceDay]:
        raise NotImplementedError

    def upsert_day(self, day: AttendanceDay) -> None:
        """Insert or replace the single record for (employee_id, work_date)."""

        raise NotImplementedError


class LeaveRepository(Protocol):
    def list_approved_for_employee(self, employee_id: str) -> Sequence[LeaveRange]:
        raise NotImplementedError
