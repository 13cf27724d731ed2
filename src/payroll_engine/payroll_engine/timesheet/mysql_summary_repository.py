from __future__ import annotations

import json
from typing import Optional

from ..common.numbers import finite_or_zero
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchone
from .model import MonthlySummary
from .repository import SummaryRepository


class MySQLSummaryRepository(SummaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, *, employee_id: str, month: str) -> Optional[MonthlySummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, month, department, full_working_days_count,
                       sunday_allowance, sunday_ot_hours, sunday_ot_amount,
                       sunday_present_count, sunday_work_hours,
                       total_work_hrs, total_ot_hrs, total_pending_hrs, net_ot_hrs,
                       marked_days_count, is_finalizable, status_counts
                FROM monthly_summaries
                WHERE employee_id=%s AND month=%s
                """,
                (employee_id, month),
            )
            r = fetchone(cur)
            if not r:
                return None
            return MonthlySummary(
                employee_id=str(r["employee_id"]),
                month=r["month"],
                department=r.get("department") or "",
                full_working_days_count=int(r.get("full_working_days_count") or 0),
                sunday_allowance=finite_or_zero(r.get("sunday_allowance")),
                sunday_ot_hours=finite_or_zero(r.get("sunday_ot_hours")),
                sunday_ot_amount=finite_or_zero(r.get("sunday_ot_amount")),
                sunday_present_count=int(r.get("sunday_present_count") or 0),
                sunday_work_hours=finite_or_zero(r.get("sunday_work_hours")),
                total_work_hrs=finite_or_zero(r.get("total_work_hrs")),
                total_ot_hrs=finite_or_zero(r.get("total_ot_hrs")),
                total_pending_hrs=finite_or_zero(r.get("total_pending_hrs")),
                net_ot_hrs=finite_or_zero(r.get("net_ot_hrs")),
                marked_days_count=int(r.get("marked_days_count") or 0),
                is_finalizable=as_bool(r.get("is_finalizable")),
                status_counts=json.loads(r.get("status_counts") or "{}"),
            )

    def save(self, summary: MonthlySummary) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO monthly_summaries(
                    employee_id, month, department, full_working_days_count,
                    sunday_allowance, sunday_ot_hours, sunday_ot_amount,
                    sunday_present_count, sunday_work_hours,
                    total_work_hrs, total_ot_hrs, total_pending_hrs, net_ot_hrs,
                    marked_days_count, is_finalizable, status_counts
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    department=VALUES(department),
                    full_working_days_count=VALUES(full_working_days_count),
                    sunday_allowance=VALUES(sunday_allowance),
                    sunday_ot_hours=VALUES(sunday_ot_hours),
                    sunday_ot_amount=VALUES(sunday_ot_amount),
                    sunday_present_count=VALUES(sunday_present_count),
                    sunday_work_hours=VALUES(sunday_work_hours),
                    total_work_hrs=VALUES(total_work_hrs),
                    total_ot_hrs=VALUES(total_ot_hrs),
                    total_pending_hrs=VALUES(total_pending_hrs),
                    net_ot_hrs=VALUES(net_ot_hrs),
                    marked_days_count=VALUES(marked_days_count),
                    is_finalizable=VALUES(is_finalizable),
                    status_counts=VALUES(status_counts)
                """,
                (
                    summary.employee_id,
                    summary.month,
                    summary.department,
                    summary.full_working_days_count,
                    finite_or_zero(summary.sunday_allowance),
                    finite_or_zero(summary.sunday_ot_hours),
                    finite_or_zero(summary.sunday_ot_amount),
                    summary.sunday_present_count,
                    finite_or_zero(summary.sunday_work_hours),
                    finite_or_zero(summary.total_work_hrs),
                    finite_or_zero(summary.total_ot_hrs),
                    finite_or_zero(summary.total_pending_hrs),
                    finite_or_zero(summary.net_ot_hrs),
                    summary.marked_days_count,
                    1 if summary.is_finalizable else 0,
                    json.dumps(dict(summary.status_counts)),
                ),
            )
