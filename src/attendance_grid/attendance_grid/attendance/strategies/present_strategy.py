from __future__ import annotations

from ...columns.model import DayColumn
from ...core.enums import AttendanceStatus
from .base import DayStatusStrategy, StatusDecision


class PresentStrategy(DayStatusStrategy):
    def decide(self, *, column: DayColumn, leave_tokens: frozenset[str]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
