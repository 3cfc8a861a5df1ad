from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles used for authorization of manager-only views."""

    EMPLOYEE = "employee"
    MANAGER = "manager"


class AttendanceStatus(str, Enum):
    """Daily attendance classification stored with each record."""

    PRESENT = "present"
    LATE = "late"
    HALF_DAY = "half-day"
    ABSENT = "absent"

    @property
    def is_attending(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)
