from __future__ import annotations

from collections import defaultdict
from dataclasses import asdict
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..common.numbers import finite_or_zero
from ..core.enums import ApprovalStatus, LoanStatus, SkipStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LoanRecord, PayrollRow, SkipEmiRequest
from .repository import ApprovalRepository, LoanRepository, PayrollRepository


def _to_loan(r: Dict[str, Any], skips: Mapping[str, SkipEmiRequest]) -> LoanRecord:
    return LoanRecord(
        loan_id=str(r["loan_id"]),
        employee_id=str(r["employee_id"]),
        amount=finite_or_zero(r.get("amount")),
        emi_amount=finite_or_zero(r.get("emi_amount")),
        emi_months=int(r.get("emi_months") or 0),
        status=LoanStatus(r["status"]),
        skip_emi_requests=dict(skips),
    )


class MySQLLoanRepository(LoanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _load(self, where: str, params: tuple) -> List[LoanRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT loan_id, employee_id, amount, emi_amount, emi_months, status
                FROM loans
                {where}
                ORDER BY loan_id
                """,
                params,
            )
            loans = fetchall(cur)
            if not loans:
                return []

            ids = [r["loan_id"] for r in loans]
            placeholders = ",".join(["%s"] * len(ids))
            cur.execute(
                f"""
                SELECT loan_id, month, status, reason
                FROM loan_skip_requests
                WHERE loan_id IN ({placeholders})
                """,
                tuple(ids),
            )
            skips: Dict[str, Dict[str, SkipEmiRequest]] = defaultdict(dict)
            for s in fetchall(cur):
                skips[str(s["loan_id"])][s["month"]] = SkipEmiRequest(
                    month=s["month"],
                    status=SkipStatus(s["status"]),
                    reason=s.get("reason") or "",
                )
            return [_to_loan(r, skips.get(str(r["loan_id"]), {})) for r in loans]

    def list_for_employee(self, employee_id: str) -> Sequence[LoanRecord]:
        return self._load("WHERE employee_id=%s", (employee_id,))

    def list_all(self) -> Sequence[LoanRecord]:
        return self._load("", ())


class MySQLApprovalRepository(ApprovalRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def status_for(self, *, employee_id: str, month: str) -> ApprovalStatus:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT status FROM attendance_approvals WHERE employee_id=%s AND month=%s",
                (employee_id, month),
            )
            r = fetchone(cur)
            if not r:
                return ApprovalStatus.NONE
            try:
                return ApprovalStatus(str(r["status"]).lower())
            except ValueError:
                return ApprovalStatus.NONE


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def credited_employee_ids(self, month: str) -> set[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id FROM payroll_credits WHERE month=%s", (month,))
            return {str(r["employee_id"]) for r in fetchall(cur)}

    def mark_credited(self, *, employee_id: str, month: str) -> bool:
        # The (employee_id, month) primary key makes a second credit a no-op insert.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO payroll_credits(employee_id, month, credited_at)
                VALUES(%s, %s, NOW())
                """,
                (employee_id, month),
            )
            return cur.rowcount == 1

    def get_loan_override(self, *, employee_id: str, month: str) -> Optional[float]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT amount FROM loan_overrides WHERE employee_id=%s AND month=%s",
                (employee_id, month),
            )
            r = fetchone(cur)
            return finite_or_zero(r["amount"]) if r else None

    def list_loan_overrides(self, month: str) -> Mapping[str, float]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id, amount FROM loan_overrides WHERE month=%s", (month,))
            return {str(r["employee_id"]): finite_or_zero(r["amount"]) for r in fetchall(cur)}

    def set_loan_override(self, *, employee_id: str, month: str, amount: float) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO loan_overrides(employee_id, month, amount)
                VALUES(%s, %s, %s)
                ON DUPLICATE KEY UPDATE amount=VALUES(amount)
                """,
                (employee_id, month, finite_or_zero(amount)),
            )

    def save_row(self, row: PayrollRow) -> None:
        data = asdict(row)
        data["status"] = row.status.value
        data["attendance_status"] = row.attendance_status.value
        data["leave_policy"] = row.leave_policy.value
        data["loan_overridden"] = 1 if row.loan_overridden else 0
        for key, value in data.items():
            if isinstance(value, float):
                data[key] = finite_or_zero(value)

        columns = list(data.keys())
        updates = ", ".join(f"{c}=VALUES({c})" for c in columns if c not in ("employee_id", "month"))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO payroll_rows({", ".join(columns)})
                VALUES({", ".join(["%s"] * len(columns))})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                tuple(data[c] for c in columns),
            )
