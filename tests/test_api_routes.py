from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest
from flask import Flask

from src.payroll_engine.payroll_engine.attendance.controller import register as register_attendance
from src.payroll_engine.payroll_engine.attendance.model import AttendanceDay
from src.payroll_engine.payroll_engine.core.engine_config import EngineConfig
from src.payroll_engine.payroll_engine.core.enums import DayStatus, ShiftType
from src.payroll_engine.payroll_engine.core.exceptions import AttendanceNotAcceptedError, NotFoundError
from src.payroll_engine.payroll_engine.payroll.controller import register as register_payroll


class StubAttendanceService:
    def record_day(self, *, employee_id, work_date, entry):
        if employee_id == "missing":
            raise NotFoundError("Employee missing not found")
        return AttendanceDay(
            employee_id=employee_id,
            work_date=work_date,
            status=DayStatus.parse(entry.status),
            shift_type=ShiftType.DAY,
            check_in=entry.check_in,
            check_out=entry.check_out,
        )


class StubPayrollService:
    def credit(self, *, employee_id, month):
        raise AttendanceNotAcceptedError("Attendance not accepted")


@pytest.fixture()
def client():
    app = Flask(__name__)
    container = SimpleNamespace(
        engine_config=EngineConfig.default(),
        attendance_service=StubAttendanceService(),
        payroll_service=StubPayrollService(),
    )
    register_attendance(app, container)
    register_payroll(app, container)
    return app.test_client()


def test_compute_day_endpoint(client):
    resp = client.post(
        "/api/attendance/compute-day",
        json={"check_in": "11:50 PM", "check_out": "7:30 AM", "shift_type": "night"},
    )

    assert resp.status_code == 200
    assert resp.get_json()["work_hrs"] == pytest.approx(7.6667)


def test_compute_day_rejects_unknown_shift(client):
    resp = client.post("/api/attendance/compute-day", json={"shift_type": "graveyard"})

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_record_day_serialises_dates_and_enums(client):
    resp = client.put("/api/attendance/E1/2024-07-01", json={"status": "Present", "check_in": "10:00 AM"})

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["work_date"] == date(2024, 7, 1).isoformat()
    assert body["status"] == "Present"
    assert body["shift_type"] == "day"


def test_error_mapping(client):
    assert client.put("/api/attendance/E1/not-a-date", json={"status": "Present"}).status_code == 400
    assert client.put("/api/attendance/missing/2024-07-01", json={"status": "Present"}).status_code == 404
    assert client.post("/api/payroll/2024-07/E1/credit").status_code == 409
    assert client.post("/api/payroll/July/E1/credit").status_code == 400
