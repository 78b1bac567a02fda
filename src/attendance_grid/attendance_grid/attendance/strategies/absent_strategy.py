from __future__ import annotations

from ...columns.model import DayColumn
from ...core.enums import AttendanceStatus
from .base import DayStatusStrategy, StatusDecision


class AbsentStrategy(DayStatusStrategy):
    """Working day listed in the employee's leaves."""

    def decide(self, *, column: DayColumn, leave_tokens: frozenset[str]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT)
