from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee


class EmployeeDirectory(Protocol):
    """Read-only roster interface used by the attendance core.

    Note (DIP): services depend on this interface, never on a concrete DB.
    """

    def get_by_ref(self, employee_ref: int) -> Optional[Employee]:
        raise NotImplementedError

    def find_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_all(self, role: Optional[Role] = None) -> Sequence[Employee]:
        raise NotImplementedError

    def replace_all(self, employees: Sequence[Employee]) -> Sequence[Employee]:
        """Administrative reset used by the demo seeder."""

        raise NotImplementedError
