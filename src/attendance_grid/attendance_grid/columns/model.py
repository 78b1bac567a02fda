from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import last_day_of_month
from ..core.constants import DAY_KEY_WIDTH, WEEKEND_DAYS
from ..core.enums import DayOfWeek
from ..core.exceptions import InvalidPeriod


@dataclass(frozen=True)
class Period:
    """Inclusive date range the grid is computed over."""

    start: date
    end: date

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            # datetime is a date subclass; a time part would break day stepping.
            if not isinstance(value, date) or isinstance(value, datetime):
                raise InvalidPeriod(f"{name} must be a calendar date, got {value!r}")
        if self.start > self.end:
            raise InvalidPeriod(f"start {self.start.isoformat()} is after end {self.end.isoformat()}")

    @classmethod
    def for_month(cls, year: int, month: int) -> "Period":
        """Whole month; ``month`` is a zero-based index (0 = January)."""
        if isinstance(month, bool) or not isinstance(month, int) or not 0 <= month <= 11:
            raise InvalidPeriod(f"month index must be 0-11, got {month!r}")
        if isinstance(year, bool) or not isinstance(year, int) or not 1 <= year <= 9999:
            raise InvalidPeriod(f"year must be 1-9999, got {year!r}")
        return cls(start=date(year, month + 1, 1), end=last_day_of_month(year, month + 1))

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def to_dict(self) -> dict:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


@dataclass(frozen=True)
class DayColumn:
    """One grid column for a single calendar day."""

    key: str
    day: date
    day_of_week: DayOfWeek
    is_weekend: bool

    @property
    def day_token(self) -> str:
        """Zero-padded day-of-month, the form leave tokens are written in."""
        return str(self.day.day).zfill(DAY_KEY_WIDTH)

    @classmethod
    def for_date(cls, day: date, *, key: str) -> "DayColumn":
        day_of_week = DayOfWeek.from_index(day.weekday())
        return cls(key=key, day=day, day_of_week=day_of_week, is_weekend=day_of_week in WEEKEND_DAYS)
