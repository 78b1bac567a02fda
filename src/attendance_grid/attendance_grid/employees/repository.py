from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Read-only source of employees for the attendance grid.

    The grid service depends on this interface only, so the JSON fixture can
    be swapped for any other data-access layer.
    """

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError
