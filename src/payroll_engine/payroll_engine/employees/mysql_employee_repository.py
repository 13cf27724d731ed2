from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.numbers import finite_or_zero
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import Employee, SalaryStructure
from .repository import EmployeeRepository

_EMPLOYEE_COLUMNS = """
    employee_id, name, department, pf_applicable, esi_applicable, is_active,
    basic, hra, conveyance, other_allowance, special_allowance,
    additional_special_allowance, gross_monthly
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(r["employee_id"]),
        name=(r.get("name") or "").strip() or "-",
        department=r.get("department") or "Staff",
        salary=SalaryStructure(
            basic=finite_or_zero(r.get("basic")),
            hra=finite_or_zero(r.get("hra")),
            conveyance=finite_or_zero(r.get("conveyance")),
            other_allowance=finite_or_zero(r.get("other_allowance")),
            special_allowance=finite_or_zero(r.get("special_allowance")),
            additional_special_allowance=finite_or_zero(r.get("additional_special_allowance")),
            gross_monthly=finite_or_zero(r.get("gross_monthly")),
        ),
        pf_applicable=as_bool(r.get("pf_applicable")),
        esi_applicable=as_bool(r.get("esi_applicable")),
        is_active=as_bool(r.get("is_active")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EMPLOYEE_COLUMNS}
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EMPLOYEE_COLUMNS}
                FROM employees
                WHERE is_active=1
                ORDER BY employee_id
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]
