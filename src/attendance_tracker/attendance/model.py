from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record per (employee, calendar day).

    ``day`` is the calendar date normalized to midnight local time.
    """

    record_id: Optional[int]
    employee_ref: int
    day: datetime
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    total_hours: float = 0.0


@dataclass(frozen=True)
class CheckInResult:
    record_id: Optional[int]
    status: AttendanceStatus
    check_in_time: datetime


@dataclass(frozen=True)
class CheckOutResult:
    record_id: Optional[int]
    status: AttendanceStatus
    check_out_time: datetime
    total_hours: float


@dataclass(frozen=True)
class TodayStatus:
    checked_in: bool
    checked_out: bool
    status: AttendanceStatus
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    total_hours: float = 0.0
