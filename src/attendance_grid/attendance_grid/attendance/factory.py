from __future__ import annotations

from dataclasses import dataclass

from ..columns.model import DayColumn
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayStatusStrategy
from .strategies.non_working_strategy import NonWorkingStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class DayStatusStrategyFactory:
    """Factory Pattern: choose the strategy for a cell.

    Precedence: weekend, then leave, then present.
    """

    def for_column(self, *, column: DayColumn, leave_tokens: frozenset[str]) -> DayStatusStrategy:
        if column.is_weekend:
            return NonWorkingStrategy()
        if column.day_token in leave_tokens:
            return AbsentStrategy()
        return PresentStrategy()
