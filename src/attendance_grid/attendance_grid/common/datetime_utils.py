from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def last_day_of_month(year: int, month: int) -> date:
    """Last calendar day of a 1-based ``month``, leap years included."""
    return date(year, month, calendar.monthrange(year, month)[1])


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from ``start`` to ``end`` inclusive."""
    # Offsets, so the walk never steps past date.max.
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().date()
