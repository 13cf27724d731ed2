from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import days_in_month, parse_month_key
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def month_bounds(month: str) -> tuple[date, date]:
    """First and last date of a "YYYY-MM" month, for BETWEEN filters."""
    year, mon = parse_month_key(month)
    return date(year, mon, 1), date(year, mon, days_in_month(month))


def as_bool(value: Any) -> bool:
    """MySQL TINYINT(1) comes back as 0/1 (or b'\\x01' for BIT columns)."""
    if isinstance(value, (bytes, bytearray)):
        return any(value)
    return bool(value)
