"""Demo data: a small roster and 30 days of randomised attendance."""

from __future__ import annotations

import logging
import random
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import hours_between, start_of_day
from ..core.enums import AttendanceStatus, Role
from ..employees.model import Employee

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES: tuple[Employee, ...] = (
    Employee(None, "MGR001", "John Manager", "manager@company.com", "Management", Role.MANAGER),
    Employee(None, "EMP001", "Alice Johnson", "alice@company.com", "Engineering"),
    Employee(None, "EMP002", "Bob Smith", "bob@company.com", "Engineering"),
    Employee(None, "EMP003", "Carol White", "carol@company.com", "Sales"),
    Employee(None, "EMP004", "David Brown", "david@company.com", "Marketing"),
    Employee(None, "EMP005", "Eva Davis", "eva@company.com", "HR"),
)


def generate_demo_attendance(
    employees: Sequence[Employee],
    today: date,
    *,
    rng: Optional[random.Random] = None,
    days: int = 30,
) -> list[AttendanceRecord]:
    """Records for the last `days` days (today included) for role=employee.

    Weekends are skipped 70% of the time. Otherwise 10% absent (no
    timestamps), 5% late (10:00-10:29) and the rest present (09:00-09:29);
    checkout falls between 17:00 and 17:59.
    """
    rng = rng or random.Random()
    staff = [e for e in employees if e.role is Role.EMPLOYEE]
    records: list[AttendanceRecord] = []

    for offset in range(days):
        day = start_of_day(today - timedelta(days=offset))
        for employee in staff:
            if day.weekday() >= 5 and rng.random() > 0.3:
                continue

            roll = rng.random()
            if roll < 0.1:
                records.append(
                    AttendanceRecord(
                        record_id=None,
                        employee_ref=employee.employee_ref,
                        day=day,
                        check_in_time=None,
                        check_out_time=None,
                        status=AttendanceStatus.ABSENT,
                    )
                )
                continue

            status = AttendanceStatus.LATE if roll < 0.15 else AttendanceStatus.PRESENT
            check_in = day.replace(hour=10 if status is AttendanceStatus.LATE else 9, minute=rng.randrange(30))
            check_out = day.replace(hour=17, minute=rng.randrange(60))
            records.append(
                AttendanceRecord(
                    record_id=None,
                    employee_ref=employee.employee_ref,
                    day=day,
                    check_in_time=check_in,
                    check_out_time=check_out,
                    status=status,
                    total_hours=hours_between(check_in, check_out),
                )
            )
    return records


def seed_demo_data(container, *, today: Optional[datetime] = None, rng: Optional[random.Random] = None) -> int:
    """Reset the store and reseed it through the repositories."""
    container.attendance_repo.clear()
    employees = container.employees_repo.replace_all(DEMO_EMPLOYEES)
    for e in employees:
        logger.info("Created employee %s (%s)", e.name, e.employee_id)

    today = today or container.clock.now()
    records = generate_demo_attendance(employees, today.date(), rng=rng)
    for record in records:
        container.attendance_repo.save(record)
    logger.info("Created %d attendance record(s)", len(records))
    return len(records)
