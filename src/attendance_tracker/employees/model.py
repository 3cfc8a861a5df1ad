from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee as read from the directory.

    Note: This is plain data; credentials never reach this object.
    """

    employee_ref: Optional[int]
    employee_id: str
    name: str
    email: str
    department: str
    role: Role = Role.EMPLOYEE


@dataclass(frozen=True)
class EmployeeIdentity:
    """The only employee fields exposed in other people's views."""

    employee_ref: Optional[int]
    name: str
    employee_id: str
    department: str

    @classmethod
    def of(cls, employee: Employee) -> "EmployeeIdentity":
        return cls(
            employee_ref=employee.employee_ref,
            name=employee.name,
            employee_id=employee.employee_id,
            department=employee.department,
        )
