from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeDirectory

_COLUMNS = "employee_ref, employee_id, name, email, department, role"


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_ref=int(row["employee_ref"]),
        employee_id=row["employee_id"],
        name=row["name"],
        email=row["email"],
        department=row["department"],
        role=Role(row["role"]),
    )


class MySQLEmployeeDirectory(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_ref(self, employee_ref: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_ref=%s", (int(employee_ref),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def find_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def find_all(self, role: Optional[Role] = None) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            if role is None:
                cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_ref")
            else:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM employees WHERE role=%s ORDER BY employee_ref",
                    (role.value,),
                )
            return [_to_employee(r) for r in fetchall(cur)]

    def replace_all(self, employees: Sequence[Employee]) -> Sequence[Employee]:
        created: list[Employee] = []
        with db_cursor(self._conn_factory) as (_, cur):
            # attendance_records cascade on employee delete
            cur.execute("DELETE FROM employees")
            for e in employees:
                cur.execute(
                    """
                    INSERT INTO employees(employee_id, name, email, department, role)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (e.employee_id, e.name, e.email, e.department, e.role.value),
                )
                created.append(
                    Employee(
                        employee_ref=int(cur.lastrowid),
                        employee_id=e.employee_id,
                        name=e.name,
                        email=e.email,
                        department=e.department,
                        role=e.role,
                    )
                )
        return created
