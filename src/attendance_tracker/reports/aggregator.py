"""Pure reductions over attendance snapshots.

Nothing here performs I/O: callers pass the result of a range query and get
counts back. Two absence rules coexist on purpose:

* explicit-or-missing: an employee with no record, or with an ``absent``
  record, is absent (absentee lists, department attendance);
* total-minus-present: headcount minus present-or-late records (weekly trend,
  manager "today" totals).
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Mapping, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import last_n_days, round_hours
from ..core.constants import TREND_DAYS, UNKNOWN_LABEL
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .model import AttendanceSummary, DepartmentAttendance, EmployeeCounts, StatusCounts, TrendPoint


def summarize(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    counts = StatusCounts()
    total_hours = 0.0
    for record in records:
        counts.add(record.status)
        total_hours += record.total_hours or 0.0

    return AttendanceSummary(
        present=counts.present,
        absent=counts.absent,
        late=counts.late,
        half_day=counts.half_day,
        total_hours=round_hours(total_hours),
    )


def group_by_department(
    records: Iterable[AttendanceRecord],
    employees_by_ref: Mapping[int, Employee],
) -> dict[str, StatusCounts]:
    groups: dict[str, StatusCounts] = {}
    for record in records:
        employee = employees_by_ref.get(record.employee_ref)
        department = employee.department if employee and employee.department else UNKNOWN_LABEL
        groups.setdefault(department, StatusCounts()).add(record.status)
    return groups


def group_by_employee(
    records: Iterable[AttendanceRecord],
    employees_by_ref: Mapping[int, Employee],
) -> dict[str, EmployeeCounts]:
    groups: dict[str, EmployeeCounts] = {}
    for record in records:
        employee = employees_by_ref.get(record.employee_ref)
        key = employee.employee_id if employee else UNKNOWN_LABEL
        if key not in groups:
            groups[key] = EmployeeCounts(name=employee.name if employee else UNKNOWN_LABEL)
        groups[key].add(record.status)
    return groups


def count_present_or_late(records: Iterable[AttendanceRecord]) -> int:
    return sum(1 for r in records if r.status.is_attending)


def _attending_refs(todays_records: Iterable[AttendanceRecord]) -> set[int]:
    return {r.employee_ref for r in todays_records if r.status is not AttendanceStatus.ABSENT}


def infer_absentees(
    employees: Sequence[Employee],
    todays_records: Iterable[AttendanceRecord],
) -> list[Employee]:
    """Employees with no record today or with an explicit absent record."""
    attending = _attending_refs(todays_records)
    return [e for e in employees if e.employee_ref not in attending]


def weekly_trend(
    reference_day: date,
    records_by_day: Mapping[date, Sequence[AttendanceRecord]],
    *,
    total_employees: int,
    days: int = TREND_DAYS,
) -> list[TrendPoint]:
    trend: list[TrendPoint] = []
    for day in last_n_days(reference_day, days):
        present = count_present_or_late(records_by_day.get(day, ()))
        trend.append(TrendPoint(date=day, present=present, absent=total_employees - present))
    return trend


def department_attendance(
    roster: Sequence[Employee],
    todays_records: Iterable[AttendanceRecord],
) -> list[DepartmentAttendance]:
    """Per-department headcount for today, derived from the full roster.

    Departments without any attendance still appear with everyone absent.
    """
    attending = _attending_refs(todays_records)
    totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for employee in roster:
        department = employee.department or UNKNOWN_LABEL
        bucket = totals[department]
        if employee.employee_ref in attending:
            bucket[0] += 1
        else:
            bucket[1] += 1

    return [
        DepartmentAttendance(department=dept, present=present, absent=absent, total=present + absent)
        for dept, (present, absent) in totals.items()
    ]


def index_by_day(records: Iterable[AttendanceRecord]) -> dict[date, list[AttendanceRecord]]:
    grouped: dict[date, list[AttendanceRecord]] = defaultdict(list)
    for record in records:
        grouped[record.day.date()].append(record)
    return dict(grouped)
