from __future__ import annotations

from dataclasses import dataclass

from ..columns.model import DayColumn, Period
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .strategies.base import StatusDecision


@dataclass(frozen=True)
class AttendanceCell:
    """Derived value: one employee on one day. Never persisted."""

    employee_id: int
    day_key: str
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceRow:
    employee: Employee
    decisions: dict[str, StatusDecision]

    @property
    def statuses(self) -> dict[str, AttendanceStatus]:
        return {key: decision.status for key, decision in self.decisions.items()}

    def count(self, status: AttendanceStatus) -> int:
        return sum(1 for s in self.statuses.values() if s == status)

    def totals(self) -> dict[str, int]:
        return {status.value: self.count(status) for status in AttendanceStatus}


@dataclass(frozen=True)
class AttendanceGrid:
    """Read-model handed to a table renderer: column headers plus one row per employee."""

    period: Period
    columns: tuple[DayColumn, ...]
    rows: tuple[AttendanceRow, ...]
