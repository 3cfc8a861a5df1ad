from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from ..attendance.model import AttendanceRecord, TodayStatus
from ..attendance.repository import AttendanceRepository
from ..attendance.service import AttendanceService
from ..common.datetime_utils import Clock, DayRange, SystemClock, day_bounds, month_bounds
from ..core.constants import RECENT_DAYS, TREND_DAYS
from ..core.enums import AttendanceStatus, Role
from ..employees.model import EmployeeIdentity
from ..employees.repository import EmployeeDirectory
from ..reports import aggregator
from ..reports.model import AttendanceSummary, DepartmentAttendance, TrendPoint


@dataclass(frozen=True)
class TodayTotals:
    present: int
    absent: int
    late: int


@dataclass(frozen=True)
class EmployeeDashboard:
    today: TodayStatus
    this_month: AttendanceSummary
    recent: list[AttendanceRecord]


@dataclass(frozen=True)
class ManagerDashboard:
    total_employees: int
    today: TodayTotals
    weekly_trend: list[TrendPoint]
    department_stats: list[DepartmentAttendance]
    absent_employees: list[EmployeeIdentity]


class DashboardService:
    """Composes the employee- and manager-facing dashboard views."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeDirectory,
        attendance_service: AttendanceService,
        *,
        clock: Optional[Clock] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._attendance_service = attendance_service
        self._clock = clock or SystemClock()

    def employee_dashboard(self, employee_ref: int) -> EmployeeDashboard:
        now = self._clock.now()
        today = day_bounds(now)

        monthly = self._attendance.find_many(employee_ref=employee_ref, day_range=month_bounds(now.month, now.year))
        recent_window = DayRange(start=day_bounds(now - timedelta(days=RECENT_DAYS - 1)).start, end=today.end)
        recent = self._attendance.find_many(employee_ref=employee_ref, day_range=recent_window, limit=RECENT_DAYS)

        return EmployeeDashboard(
            today=self._attendance_service.get_today_status(employee_ref),
            this_month=aggregator.summarize(monthly),
            recent=list(recent),
        )

    def manager_dashboard(self) -> ManagerDashboard:
        now = self._clock.now()
        roster = list(self._employees.find_all(Role.EMPLOYEE))
        total_employees = len(roster)

        week_start = day_bounds(now - timedelta(days=TREND_DAYS - 1)).start
        week = self._attendance.find_many(day_range=DayRange(start=week_start, end=day_bounds(now).end))
        by_day = aggregator.index_by_day(week)
        todays = by_day.get(now.date(), [])

        present = aggregator.count_present_or_late(todays)
        return ManagerDashboard(
            total_employees=total_employees,
            today=TodayTotals(
                present=present,
                absent=total_employees - present,
                late=sum(1 for r in todays if r.status is AttendanceStatus.LATE),
            ),
            weekly_trend=aggregator.weekly_trend(now.date(), by_day, total_employees=total_employees),
            department_stats=aggregator.department_attendance(roster, todays),
            absent_employees=[EmployeeIdentity.of(e) for e in aggregator.infer_absentees(roster, todays)],
        )
