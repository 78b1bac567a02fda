from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.factory import DayStatusStrategyFactory
from .attendance.service import AttendanceGridService
from .core.constants import DEFAULT_TABLE_NAME
from .employees.json_employee_repository import JsonEmployeeRepository


@dataclass(frozen=True)
class Container:
    employees_repo: JsonEmployeeRepository
    grid_service: AttendanceGridService


def build_container(*, employees_path: Path | str, table_name: str = DEFAULT_TABLE_NAME) -> Container:
    employees_repo = JsonEmployeeRepository(employees_path)
    grid_service = AttendanceGridService(
        employees_repo,
        strategy_factory=DayStatusStrategyFactory(),
        table_name=table_name,
    )
    return Container(employees_repo=employees_repo, grid_service=grid_service)
