from __future__ import annotations

from typing import Sequence

from ..core.constants import ALL_DEPARTMENTS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, month_bounds
from .model import Holiday
from .repository import HolidayRepository


def _split_departments(value) -> tuple[str, ...]:
    # Stored as a comma separated list, e.g. "Staff,Worker" or "All".
    parts = tuple(p.strip() for p in str(value or "").split(",") if p.strip())
    return parts or (ALL_DEPARTMENTS,)


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_month(self, month: str) -> Sequence[Holiday]:
        start, end = month_bounds(month)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_date, name, departments
                FROM holidays
                WHERE holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date
                """,
                (start, end),
            )
            return [
                Holiday(
                    holiday_date=r["holiday_date"],
                    name=r["name"],
                    departments=_split_departments(r.get("departments")),
                )
                for r in fetchall(cur)
            ]
