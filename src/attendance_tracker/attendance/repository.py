from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..common.datetime_utils import DayRange
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Record store holding at most one record per (employee_ref, day)."""

    def find_one(self, employee_ref: int, day_range: DayRange) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def find_many(
        self,
        *,
        employee_ref: Optional[int] = None,
        day_range: Optional[DayRange] = None,
        status: Optional[AttendanceStatus] = None,
        limit: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        """Filtered records, newest day first. Every filter is optional."""

        raise NotImplementedError

    def record_check_in(
        self,
        employee_ref: int,
        *,
        day: datetime,
        check_in_time: datetime,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        """Atomic find-or-create keyed by (employee_ref, day).

        Fills in an existing record that has no check-in yet; raises
        AlreadyCheckedIn when the check-in is already stored.
        """

        raise NotImplementedError

    def record_check_out(
        self,
        record_id: int,
        *,
        check_out_time: datetime,
        total_hours: float,
        status: AttendanceStatus,
    ) -> bool:
        """Store the checkout only if none is stored yet."""

        raise NotImplementedError

    def mark_absent(self, employee_ref: int, *, day: datetime) -> Optional[AttendanceRecord]:
        """Insert an absent record unless one already exists for (employee_ref, day).

        Returns the new record, or None when the day is already recorded. Never
        touches an existing record.
        """

        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        """Upsert by (employee_ref, day); used by seeding."""

        raise NotImplementedError

    def clear(self) -> int:
        """Administrative reset used by the demo seeder."""

        raise NotImplementedError
