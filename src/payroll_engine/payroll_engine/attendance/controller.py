from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import error_response, json_body, to_jsonable
from ..core.exceptions import DomainError
from ..container import Container
from .hours import compute_day
from .service import DayEntry


def _entry_from(data: dict) -> DayEntry:
    return DayEntry(
        status=str(data.get("status") or ""),
        shift_type=data.get("shift_type") or None,
        check_in=str(data.get("check_in") or ""),
        lunch_in=str(data.get("lunch_in") or ""),
        lunch_out=str(data.get("lunch_out") or ""),
        check_out=str(data.get("check_out") or ""),
        note=data.get("note"),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/compute-day", methods=["POST"], endpoint="compute_day")
    def compute_day_api():
        """Stateless preview of one day's hours; nothing is stored."""
        data = json_body()
        try:
            hours = compute_day(
                data.get("check_in"),
                data.get("lunch_in"),
                data.get("lunch_out"),
                data.get("check_out"),
                data.get("shift_type") or "day",
                data.get("status") or None,
                config=container.engine_config,
            )
        except DomainError as e:
            return error_response(e)
        return jsonify(to_jsonable(hours))

    @app.route("/api/attendance/<employee_id>/<work_date>", methods=["PUT"], endpoint="record_day")
    def record_day(employee_id: str, work_date: str):
        try:
            day = container.attendance_service.record_day(
                employee_id=employee_id,
                work_date=parse_iso_date(work_date),
                entry=_entry_from(json_body()),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify(to_jsonable(day))
