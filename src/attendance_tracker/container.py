from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, SystemClock
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeDirectory
from .employees.repository import EmployeeDirectory
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    clock: Clock

    attendance_repo: AttendanceRepository
    employees_repo: EmployeeDirectory

    attendance_service: AttendanceService
    report_service: ReportService
    dashboard_service: DashboardService


def assemble_container(
    *,
    attendance_repo: AttendanceRepository,
    employees_repo: EmployeeDirectory,
    clock: Optional[Clock] = None,
    strategy_factory: Optional[AttendanceStrategyFactory] = None,
) -> Container:
    clock = clock or SystemClock()
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        clock=clock,
        strategy_factory=strategy_factory or AttendanceStrategyFactory(),
    )
    report_service = ReportService(attendance_repo, employees_repo, clock=clock)
    dashboard_service = DashboardService(attendance_repo, employees_repo, attendance_service, clock=clock)

    return Container(
        clock=clock,
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        attendance_service=attendance_service,
        report_service=report_service,
        dashboard_service=dashboard_service,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return assemble_container(
        attendance_repo=MySQLAttendanceRepository(conn),
        employees_repo=MySQLEmployeeDirectory(conn),
    )
