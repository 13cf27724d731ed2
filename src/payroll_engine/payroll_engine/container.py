from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository, MySQLLeaveRepository
from .attendance.service import AttendanceService
from .core.engine_config import EngineConfig
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .payroll.mysql_payroll_repository import MySQLApprovalRepository, MySQLLoanRepository, MySQLPayrollRepository
from .payroll.service import PayrollService
from .timesheet.mysql_summary_repository import MySQLSummaryRepository
from .timesheet.service import TimesheetService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    engine_config: EngineConfig

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    leaves_repo: MySQLLeaveRepository
    holidays_repo: MySQLHolidayRepository
    summaries_repo: MySQLSummaryRepository
    loans_repo: MySQLLoanRepository
    approvals_repo: MySQLApprovalRepository
    payroll_repo: MySQLPayrollRepository

    attendance_service: AttendanceService
    timesheet_service: TimesheetService
    payroll_service: PayrollService


def build_container(*, db_config: dict, engine_config: Optional[EngineConfig] = None) -> Container:
    config = engine_config or EngineConfig.default()
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    summaries_repo = MySQLSummaryRepository(conn)
    loans_repo = MySQLLoanRepository(conn)
    approvals_repo = MySQLApprovalRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)

    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        holidays_repo,
        leaves_repo,
        config=config,
    )
    timesheet_service = TimesheetService(attendance_repo, employees_repo, summaries_repo, config=config)
    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        holidays_repo,
        loans_repo,
        approvals_repo,
        payroll_repo,
        config=config,
    )

    return Container(
        conn=conn,
        engine_config=config,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        holidays_repo=holidays_repo,
        summaries_repo=summaries_repo,
        loans_repo=loans_repo,
        approvals_repo=approvals_repo,
        payroll_repo=payroll_repo,
        attendance_service=attendance_service,
        timesheet_service=timesheet_service,
        payroll_service=payroll_service,
    )
