from __future__ import annotations

from ...columns.model import DayColumn
from ...core.enums import AttendanceStatus
from .base import DayStatusStrategy, StatusDecision


class NonWorkingStrategy(DayStatusStrategy):
    """Weekend day: overrides any leave recorded for it."""

    def decide(self, *, column: DayColumn, leave_tokens: frozenset[str]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.NON_WORKING)
