from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.common.datetime_utils import DayRange
from attendance_tracker.container import assemble_container
from attendance_tracker.core.enums import AttendanceStatus, Role
from attendance_tracker.core.exceptions import AlreadyCheckedIn
from attendance_tracker.employees.model import Employee
from attendance_tracker.main import create_app


class FakeClock:
    def __init__(self, now: datetime):
        self.current = now

    def now(self) -> datetime:
        return self.current

    def set(self, now: datetime) -> None:
        self.current = now


class InMemoryAttendance:
    def __init__(self):
        self._by_key: dict[tuple[int, datetime], AttendanceRecord] = {}
        self._id = 0
        self._lock = threading.Lock()

    def all(self) -> list[AttendanceRecord]:
        return list(self._by_key.values())

    def find_one(self, employee_ref: int, day_range: DayRange) -> Optional[AttendanceRecord]:
        for r in list(self._by_key.values()):
            if r.employee_ref == employee_ref and r.day in day_range:
                return r
        return None

    def find_many(self, *, employee_ref=None, day_range=None, status=None, limit=None):
        items = [
            r
            for r in list(self._by_key.values())
            if (employee_ref is None or r.employee_ref == employee_ref)
            and (day_range is None or r.day in day_range)
            and (status is None or r.status == status)
        ]
        items.sort(key=lambda r: (r.day, r.record_id), reverse=True)
        return items[:limit] if limit is not None else items

    def record_check_in(self, employee_ref: int, *, day: datetime, check_in_time: datetime, status: AttendanceStatus):
        with self._lock:
            existing = self._by_key.get((employee_ref, day))
            if existing and existing.check_in_time is not None:
                raise AlreadyCheckedIn()
            if existing is None:
                self._id += 1
                existing = AttendanceRecord(
                    record_id=self._id,
                    employee_ref=employee_ref,
                    day=day,
                    check_in_time=None,
                    check_out_time=None,
                    status=AttendanceStatus.ABSENT,
                )
            rec = replace(existing, check_in_time=check_in_time, status=status)
            self._by_key[(employee_ref, day)] = rec
            return rec

    def record_check_out(self, record_id: int, *, check_out_time: datetime, total_hours: float, status: AttendanceStatus):
        with self._lock:
            for key, r in self._by_key.items():
                if r.record_id == record_id:
                    if r.check_out_time is not None:
                        return False
                    self._by_key[key] = replace(r, check_out_time=check_out_time, total_hours=total_hours, status=status)
                    return True
            return False

    def mark_absent(self, employee_ref: int, *, day: datetime) -> Optional[AttendanceRecord]:
        with self._lock:
            if (employee_ref, day) in self._by_key:
                return None
            self._id += 1
            rec = AttendanceRecord(
                record_id=self._id,
                employee_ref=employee_ref,
                day=day,
                check_in_time=None,
                check_out_time=None,
                status=AttendanceStatus.ABSENT,
            )
            self._by_key[(employee_ref, day)] = rec
            return rec

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        with self._lock:
            key = (record.employee_ref, record.day)
            existing = self._by_key.get(key)
            if existing:
                record_id = existing.record_id
            else:
                self._id += 1
                record_id = self._id
            saved = replace(record, record_id=record_id)
            self._by_key[key] = saved
            return saved

    def clear(self) -> int:
        count = len(self._by_key)
        self._by_key.clear()
        return count


class InMemoryDirectory:
    def __init__(self, employees: list[Employee]):
        self._employees = list(employees)

    def get_by_ref(self, employee_ref: int) -> Optional[Employee]:
        return next((e for e in self._employees if e.employee_ref == employee_ref), None)

    def find_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self._employees if e.employee_id == employee_id), None)

    def find_all(self, role: Optional[Role] = None):
        return [e for e in self._employees if role is None or e.role == role]

    def replace_all(self, employees):
        self._employees = [replace(e, employee_ref=i) for i, e in enumerate(employees, start=1)]
        return list(self._employees)


ROSTER = [
    Employee(1, "MGR001", "John Manager", "manager@company.com", "Management", Role.MANAGER),
    Employee(2, "EMP001", "Alice Johnson", "alice@company.com", "Engineering"),
    Employee(3, "EMP002", "Bob Smith", "bob@company.com", "Engineering"),
    Employee(4, "EMP003", "Carol White", "carol@company.com", "Sales"),
    Employee(5, "EMP004", "David Brown", "david@company.com", "Marketing"),
    Employee(6, "EMP005", "Eva Davis", "eva@company.com", "HR"),
]


@pytest.fixture
def clock():
    # Wednesday
    return FakeClock(datetime(2026, 3, 11, 9, 15, 0))


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def directory():
    return InMemoryDirectory(ROSTER)


@pytest.fixture
def container(attendance_repo, directory, clock):
    return assemble_container(attendance_repo=attendance_repo, employees_repo=directory, clock=clock)


@pytest.fixture
def app(container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, employee: Employee) -> None:
    with client.session_transaction() as sess:
        sess["user_id"] = employee.employee_ref
        sess["role"] = employee.role.value


@pytest.fixture
def as_employee(client):
    login(client, ROSTER[1])
    return client


@pytest.fixture
def as_manager(client):
    login(client, ROSTER[0])
    return client


@pytest.fixture
def roster():
    return list(ROSTER)
