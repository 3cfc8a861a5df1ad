from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from ..employees.model import EmployeeIdentity


@dataclass
class StatusCounts:
    """Per-status tally; one bucket per AttendanceStatus member."""

    present: int = 0
    absent: int = 0
    late: int = 0
    half_day: int = 0

    def add(self, status: AttendanceStatus) -> None:
        if status is AttendanceStatus.PRESENT:
            self.present += 1
        elif status is AttendanceStatus.ABSENT:
            self.absent += 1
        elif status is AttendanceStatus.LATE:
            self.late += 1
        elif status is AttendanceStatus.HALF_DAY:
            self.half_day += 1
        else:
            raise ValueError(f"Unhandled attendance status: {status!r}")


@dataclass
class EmployeeCounts(StatusCounts):
    name: str = ""


@dataclass(frozen=True)
class AttendanceSummary:
    present: int
    absent: int
    late: int
    half_day: int
    total_hours: float


@dataclass(frozen=True)
class MonthlySummary:
    month: int
    year: int
    present: int
    absent: int
    late: int
    half_day: int
    total_hours: float


@dataclass(frozen=True)
class OrgSummary:
    month: int
    year: int
    total_records: int
    present: int
    absent: int
    late: int
    half_day: int
    total_hours: float
    by_department: dict[str, StatusCounts] = field(default_factory=dict)
    by_employee: dict[str, EmployeeCounts] = field(default_factory=dict)


@dataclass(frozen=True)
class TrendPoint:
    date: date
    present: int
    absent: int


@dataclass(frozen=True)
class DepartmentAttendance:
    department: str
    present: int
    absent: int
    total: int


@dataclass(frozen=True)
class AttendanceListing:
    """A record joined with the identity of its employee."""

    record: AttendanceRecord
    employee: Optional[EmployeeIdentity]


@dataclass(frozen=True)
class TodayOverview:
    date: date
    total_employees: int
    present: int
    absent: int
    late: int
    checked_in: int
    checked_out: int
    absent_employees: list[EmployeeIdentity]
    attendance: list[AttendanceListing]


@dataclass(frozen=True)
class ExportRow:
    date: str
    employee_id: str
    name: str
    department: str
    check_in_time: str
    check_out_time: str
    status: str
    total_hours: float


EXPORT_HEADERS = {
    "date": "Date",
    "employee_id": "Employee ID",
    "name": "Name",
    "department": "Department",
    "check_in_time": "Check In Time",
    "check_out_time": "Check Out Time",
    "status": "Status",
    "total_hours": "Total Hours",
}


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else None
