from __future__ import annotations

from typing import Optional, Sequence

from ..columns.model import DayColumn
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .factory import DayStatusStrategyFactory
from .model import AttendanceCell
from .strategies.base import StatusDecision

_default_factory = DayStatusStrategyFactory()


def decide_row(
    employee: Employee,
    columns: Sequence[DayColumn],
    *,
    strategy_factory: Optional[DayStatusStrategyFactory] = None,
) -> dict[str, StatusDecision]:
    """Run the status strategy for every column. Leave tokens that match no
    column (``"99"``, ``"x"``) are ignored."""
    factory = strategy_factory or _default_factory
    leave_tokens = employee.leave_tokens()

    decisions: dict[str, StatusDecision] = {}
    for column in columns:
        strategy = factory.for_column(column=column, leave_tokens=leave_tokens)
        decisions[column.key] = strategy.decide(column=column, leave_tokens=leave_tokens)
    return decisions


def format_row(
    employee: Employee,
    columns: Sequence[DayColumn],
    *,
    strategy_factory: Optional[DayStatusStrategyFactory] = None,
) -> dict[str, AttendanceStatus]:
    """Map every column key to the employee's status on that day."""
    decisions = decide_row(employee, columns, strategy_factory=strategy_factory)
    return {key: decision.status for key, decision in decisions.items()}


def format_cells(
    employee: Employee,
    columns: Sequence[DayColumn],
    *,
    strategy_factory: Optional[DayStatusStrategyFactory] = None,
) -> tuple[AttendanceCell, ...]:
    row = format_row(employee, columns, strategy_factory=strategy_factory)
    return tuple(
        AttendanceCell(employee_id=employee.employee_id, day_key=column.key, status=row[column.key])
        for column in columns
    )
