from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..common.numbers import finite_or_zero
from ..core.enums import DayStatus, ShiftType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, month_bounds
from .model import AttendanceDay, LeaveRange
from .repository import AttendanceRepository, LeaveRepository

_DAY_COLUMNS = """
    employee_id, work_date, status, shift_type,
    check_in, lunch_in, lunch_out, check_out,
    work_hrs, ot_hrs, pending_hrs, note
"""


def _to_day(r: Dict[str, Any]) -> AttendanceDay:
    return AttendanceDay(
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        status=DayStatus.parse(r["status"]) or DayStatus.ABSENT,
        shift_type=ShiftType(r["shift_type"]) if r.get("shift_type") else None,
        check_in=r.get("check_in") or "",
        lunch_in=r.get("lunch_in") or "",
        lunch_out=r.get("lunch_out") or "",
        check_out=r.get("check_out") or "",
        work_hrs=finite_or_zero(r.get("work_hrs")),
        ot_hrs=finite_or_zero(r.get("ot_hrs")),
        pending_hrs=finite_or_zero(r.get("pending_hrs")),
        note=r.get("note"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_day(self, employee_id: str, work_date: date) -> Optional[AttendanceDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_DAY_COLUMNS}
                FROM attendance_days
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_day(r) if r else None

    def list_month(self, *, month: str, employee_id: Optional[str] = None) -> Sequence[AttendanceDay]:
        start, end = month_bounds(month)
        sql = f"""
            SELECT {_DAY_COLUMNS}
            FROM attendance_days
            WHERE work_date BETWEEN %s AND %s
        """
        params: list = [start, end]
        if employee_id is not None:
            sql += " AND employee_id=%s"
            params.append(employee_id)
        sql += " ORDER BY employee_id, work_date"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_day(r) for r in fetchall(cur)]

    def upsert_day(self, day: AttendanceDay) -> None:
        # PRIMARY KEY (employee_id, work_date) keeps exactly one record per day.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_days(
                    employee_id, work_date, status, shift_type,
                    check_in, lunch_in, lunch_out, check_out,
                    work_hrs, ot_hrs, pending_hrs, note
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status), shift_type=VALUES(shift_type),
                    check_in=VALUES(check_in), lunch_in=VALUES(lunch_in),
                    lunch_out=VALUES(lunch_out), check_out=VALUES(check_out),
                    work_hrs=VALUES(work_hrs), ot_hrs=VALUES(ot_hrs),
                    pending_hrs=VALUES(pending_hrs), note=VALUES(note)
                """,
                (
                    day.employee_id,
                    day.work_date,
                    day.status.value,
                    day.shift_type.value if day.shift_type else None,
                    day.check_in or None,
                    day.lunch_in or None,
                    day.lunch_out or None,
                    day.check_out or None,
                    finite_or_zero(day.work_hrs),
                    finite_or_zero(day.ot_hrs),
                    finite_or_zero(day.pending_hrs),
                    day.note,
                ),
            )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved_for_employee(self, employee_id: str) -> Sequence[LeaveRange]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, start_date, end_date
                FROM leave_requests
                WHERE employee_id=%s AND status='Approved'
                ORDER BY start_date
                """,
                (employee_id,),
            )
            return [
                LeaveRange(
                    employee_id=str(r["employee_id"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                )
                for r in fetchall(cur)
            ]
