from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, to_jsonable
from ..common.time_text import format_hours
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheet/<employee_id>/<month>", methods=["GET"], endpoint="monthly_timesheet")
    def monthly_timesheet(employee_id: str, month: str):
        try:
            timesheet = container.timesheet_service.recompute(employee_id=employee_id, month=month)
        except DomainError as e:
            return error_response(e)

        summary = timesheet.summary
        return jsonify(
            {
                "lines": to_jsonable(list(timesheet.lines)),
                "summary": to_jsonable(summary),
                "display": {
                    "total_work_hrs": format_hours(summary.total_work_hrs),
                    "total_ot_hrs": format_hours(summary.total_ot_hrs),
                    "total_pending_hrs": format_hours(summary.total_pending_hrs),
                    "net_ot_hrs": format_hours(summary.net_ot_hrs, signed=True),
                },
            }
        )
