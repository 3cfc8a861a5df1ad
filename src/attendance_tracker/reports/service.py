from __future__ import annotations

import csv
import io
import logging
from dataclasses import asdict
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, SystemClock, day_bounds, month_bounds, range_bounds
from ..common.validators import require_date_range, require_month_year
from ..core.constants import LISTING_LIMIT, NOT_AVAILABLE
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import NoRecordsFound, NotFound
from ..employees.model import Employee, EmployeeIdentity
from ..employees.repository import EmployeeDirectory
from . import aggregator
from .model import (
    EXPORT_HEADERS,
    AttendanceListing,
    ExportRow,
    MonthlySummary,
    OrgSummary,
    TodayOverview,
    format_timestamp,
)

logger = logging.getLogger(__name__)


class ReportService:
    """Read-only attendance statistics for employees and managers."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeDirectory,
        *,
        clock: Optional[Clock] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock or SystemClock()

    def _target_month(self, month: Optional[int], year: Optional[int]) -> tuple[int, int]:
        today = self._clock.now()
        return require_month_year(
            month if month is not None else today.month,
            year if year is not None else today.year,
        )

    def _employees_by_ref(self) -> dict[int, Employee]:
        return {e.employee_ref: e for e in self._employees.find_all()}

    def _join(self, records: Sequence[AttendanceRecord]) -> list[AttendanceListing]:
        by_ref = self._employees_by_ref()
        out: list[AttendanceListing] = []
        for r in records:
            employee = by_ref.get(r.employee_ref)
            out.append(AttendanceListing(record=r, employee=EmployeeIdentity.of(employee) if employee else None))
        return out

    def get_summary(
        self,
        employee_ref: Optional[int] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> MonthlySummary:
        month, year = self._target_month(month, year)
        records = self._attendance.find_many(employee_ref=employee_ref, day_range=month_bounds(month, year))
        s = aggregator.summarize(records)
        return MonthlySummary(
            month=month,
            year=year,
            present=s.present,
            absent=s.absent,
            late=s.late,
            half_day=s.half_day,
            total_hours=s.total_hours,
        )

    def get_org_summary(self, month: Optional[int] = None, year: Optional[int] = None) -> OrgSummary:
        month, year = self._target_month(month, year)
        records = self._attendance.find_many(day_range=month_bounds(month, year))
        by_ref = self._employees_by_ref()
        s = aggregator.summarize(records)
        return OrgSummary(
            month=month,
            year=year,
            total_records=len(records),
            present=s.present,
            absent=s.absent,
            late=s.late,
            half_day=s.half_day,
            total_hours=s.total_hours,
            by_department=aggregator.group_by_department(records, by_ref),
            by_employee=aggregator.group_by_employee(records, by_ref),
        )

    def list_attendance(
        self,
        *,
        employee_code: Optional[str] = None,
        day: Optional[date] = None,
        status: Optional[AttendanceStatus] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> list[AttendanceListing]:
        employee_ref = None
        if employee_code:
            employee = self._employees.find_by_employee_id(employee_code)
            if not employee:
                return []
            employee_ref = employee.employee_ref

        day_range = None
        if day is not None:
            day_range = day_bounds(day)
        else:
            window = require_month_year(month, year)
            if window:
                day_range = month_bounds(*window)

        records = self._attendance.find_many(
            employee_ref=employee_ref, day_range=day_range, status=status, limit=LISTING_LIMIT
        )
        return self._join(records)

    def get_employee_attendance(
        self,
        employee_ref: int,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> list[AttendanceListing]:
        window = require_month_year(month, year)
        records = self._attendance.find_many(
            employee_ref=employee_ref, day_range=month_bounds(*window) if window else None
        )
        return self._join(records)

    def today_overview(self) -> TodayOverview:
        today = self._clock.now()
        records = self._attendance.find_many(day_range=day_bounds(today))
        roster = list(self._employees.find_all(Role.EMPLOYEE))

        return TodayOverview(
            date=today.date(),
            total_employees=len(roster),
            present=aggregator.count_present_or_late(records),
            absent=sum(1 for r in records if r.status is AttendanceStatus.ABSENT),
            late=sum(1 for r in records if r.status is AttendanceStatus.LATE),
            checked_in=sum(1 for r in records if r.check_in_time),
            checked_out=sum(1 for r in records if r.check_out_time),
            absent_employees=[EmployeeIdentity.of(e) for e in aggregator.infer_absentees(roster, records)],
            attendance=self._join(records),
        )

    def export_range(
        self,
        start_date: date,
        end_date: date,
        employee_code: Optional[str] = None,
    ) -> list[ExportRow]:
        start_date, end_date = require_date_range(start_date, end_date)

        employee_ref = None
        if employee_code:
            employee = self._employees.find_by_employee_id(employee_code)
            if not employee:
                raise NotFound()
            employee_ref = employee.employee_ref

        records = self._attendance.find_many(employee_ref=employee_ref, day_range=range_bounds(start_date, end_date))
        if not records:
            raise NoRecordsFound()

        rows: list[ExportRow] = []
        for listing in self._join(records):
            r, who = listing.record, listing.employee
            rows.append(
                ExportRow(
                    date=r.day.strftime("%Y-%m-%d"),
                    employee_id=who.employee_id if who else NOT_AVAILABLE,
                    name=who.name if who else NOT_AVAILABLE,
                    department=who.department if who else NOT_AVAILABLE,
                    check_in_time=format_timestamp(r.check_in_time) or NOT_AVAILABLE,
                    check_out_time=format_timestamp(r.check_out_time) or NOT_AVAILABLE,
                    status=r.status.value,
                    total_hours=r.total_hours or 0,
                )
            )
        logger.info("Exported %d attendance row(s) for %s..%s", len(rows), start_date, end_date)
        return rows


def render_csv(rows: Sequence[ExportRow]) -> str:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(EXPORT_HEADERS))
    writer.writerow(EXPORT_HEADERS)
    for row in rows:
        writer.writerow(asdict(row))
    return out.getvalue()
