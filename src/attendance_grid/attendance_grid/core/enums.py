from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Per-day status of one employee in the grid."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    NON_WORKING = "NON_WORKING"


class DayOfWeek(str, Enum):
    """Weekday labels, in the order of ``date.weekday()``."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def from_index(cls, index: int) -> "DayOfWeek":
        return list(cls)[index]


class ColumnKeyMode(str, Enum):
    """How day columns are keyed.

    DAY_OF_MONTH collapses same-numbered days of different months into one
    column. ISO_DATE gives every calendar day its own column.
    """

    DAY_OF_MONTH = "day"
    ISO_DATE = "date"
