from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import Clock, SystemClock, day_bounds, month_bounds
from ..common.validators import require_month_year
from ..core.constants import HISTORY_LIMIT
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AlreadyCheckedIn, AlreadyCheckedOut, NotCheckedInYet, NotFound
from ..employees.model import Employee
from ..employees.repository import EmployeeDirectory
from .classifier import classify_on_check_in, classify_on_check_out
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, CheckInResult, CheckOutResult, TodayStatus
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in/check-out workflow and per-employee record queries."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeDirectory,
        *,
        clock: Clock | None = None,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock or SystemClock()
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def _require_employee(self, employee_ref: int) -> Employee:
        employee = self._employees.get_by_ref(employee_ref)
        if not employee:
            raise NotFound()
        return employee

    def check_in(self, employee_ref: int) -> CheckInResult:
        self._require_employee(employee_ref)
        now = self._clock.now()
        today = day_bounds(now)

        existing = self._attendance.find_one(employee_ref, today)
        if existing and existing.check_in_time is not None:
            raise AlreadyCheckedIn()

        status = classify_on_check_in(now, factory=self._factory)
        record = self._attendance.record_check_in(
            employee_ref,
            day=today.start,
            check_in_time=now,
            status=status,
        )
        logger.info("Employee %s checked in at %s (%s)", employee_ref, now.isoformat(), status.value)
        return CheckInResult(record_id=record.record_id, status=record.status, check_in_time=now)

    def check_out(self, employee_ref: int) -> CheckOutResult:
        self._require_employee(employee_ref)
        now = self._clock.now()

        record = self._attendance.find_one(employee_ref, day_bounds(now))
        if not record or record.check_in_time is None:
            raise NotCheckedInYet()
        if record.check_out_time is not None:
            raise AlreadyCheckedOut()

        status, total_hours = classify_on_check_out(
            record.check_in_time, now, record.status, factory=self._factory
        )
        if not self._attendance.record_check_out(
            record.record_id,
            check_out_time=now,
            total_hours=total_hours,
            status=status,
        ):
            # Another request stored the checkout between our read and write.
            raise AlreadyCheckedOut()

        logger.info("Employee %s checked out after %.2fh (%s)", employee_ref, total_hours, status.value)
        return CheckOutResult(
            record_id=record.record_id,
            status=status,
            check_out_time=now,
            total_hours=total_hours,
        )

    def get_history(
        self,
        employee_ref: int,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        window = require_month_year(month, year)
        day_range = month_bounds(*window) if window else None
        return self._attendance.find_many(employee_ref=employee_ref, day_range=day_range, limit=HISTORY_LIMIT)

    def get_today_record(self, employee_ref: int) -> Optional[AttendanceRecord]:
        return self._attendance.find_one(employee_ref, day_bounds(self._clock.now()))

    def get_today_status(self, employee_ref: int) -> TodayStatus:
        record = self.get_today_record(employee_ref)
        if not record:
            return TodayStatus(checked_in=False, checked_out=False, status=AttendanceStatus.ABSENT)
        return TodayStatus(
            checked_in=record.check_in_time is not None,
            checked_out=record.check_out_time is not None,
            status=record.status,
            check_in_time=record.check_in_time,
            check_out_time=record.check_out_time,
            total_hours=record.total_hours,
        )

    def mark_absentees(self, day: Optional[date] = None) -> list[AttendanceRecord]:
        """Store explicit absent records for employees without a record on day."""
        bounds = day_bounds(day or self._clock.now())
        recorded = {r.employee_ref for r in self._attendance.find_many(day_range=bounds)}

        created: list[AttendanceRecord] = []
        for employee in self._employees.find_all(Role.EMPLOYEE):
            if employee.employee_ref in recorded:
                continue
            # Insert-only: a check-in that lands after the snapshot is kept.
            record = self._attendance.mark_absent(employee.employee_ref, day=bounds.start)
            if record is not None:
                created.append(record)
        logger.info("Marked %d employee(s) absent for %s", len(created), bounds.start.date().isoformat())
        return created
