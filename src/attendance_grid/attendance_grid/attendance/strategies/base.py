from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...columns.model import DayColumn
from ...core.constants import STATUS_MARKERS
from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus

    @property
    def marker(self) -> str:
        return STATUS_MARKERS[self.status]


class DayStatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide the status of one grid cell."""

    @abstractmethod
    def decide(self, *, column: DayColumn, leave_tokens: frozenset[str]) -> StatusDecision:
        raise NotImplementedError
