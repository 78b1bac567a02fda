from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from ..core.exceptions import DataSourceError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class JsonEmployeeRepository(EmployeeRepository):
    """Employees read from a JSON fixture: ``[{"id": 1, "name": "...", "leaves": "05, 12"}]``.

    The file is re-read on every call; records are never cached or mutated.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    def list_employees(self) -> Sequence[Employee]:
        raw = self._load()
        employees = [self._to_model(item, index) for index, item in enumerate(raw)]
        logger.debug("Loaded %d employees from %s", len(employees), self._path)
        return employees

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        for employee in self.list_employees():
            if employee.employee_id == employee_id:
                return employee
        return None

    def _load(self) -> list:
        try:
            with self._path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError as e:
            raise DataSourceError(f"Employee data file not found: {self._path}") from e
        except OSError as e:
            raise DataSourceError(f"Employee data file cannot be read: {self._path}: {e}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise DataSourceError(f"Employee data file is not valid UTF-8 JSON: {self._path}: {e}") from e

        if not isinstance(data, list):
            raise ValidationError("Employee data must be a JSON array")
        return data

    @staticmethod
    def _to_model(item: Any, index: int) -> Employee:
        if not isinstance(item, dict):
            raise ValidationError(f"Employee record #{index} must be an object")

        employee_id = item.get("id")
        if isinstance(employee_id, bool) or not isinstance(employee_id, int):
            raise ValidationError(f"Employee record #{index} has no integer id")

        name = item.get("name")
        if not isinstance(name, str):
            raise ValidationError(f"Employee record #{index} has no name")

        leaves = item.get("leaves")
        if leaves is None:
            leaves = ""
        if not isinstance(leaves, str):
            raise ValidationError(f"Employee record #{index}: leaves must be a comma-separated string")

        return Employee(employee_id=employee_id, name=name, leaves=leaves)
