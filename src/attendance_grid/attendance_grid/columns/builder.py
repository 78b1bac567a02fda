from __future__ import annotations

import logging
from datetime import date

from ..common.datetime_utils import iter_days
from ..core.constants import DAY_KEY_WIDTH
from ..core.enums import ColumnKeyMode
from .model import DayColumn, Period

logger = logging.getLogger(__name__)


def column_key(day: date, key_mode: ColumnKeyMode = ColumnKeyMode.DAY_OF_MONTH) -> str:
    if key_mode == ColumnKeyMode.ISO_DATE:
        return day.isoformat()
    return str(day.day).zfill(DAY_KEY_WIDTH)


def build_columns(
    period: Period,
    *,
    key_mode: ColumnKeyMode = ColumnKeyMode.DAY_OF_MONTH,
) -> tuple[DayColumn, ...]:
    """Build the ordered day columns for ``period``.

    Walks the period one day at a time, both ends included. A key already
    emitted in this run is skipped, so with DAY_OF_MONTH keys a range that
    spans two months keeps only the first of each day number. Pass
    ``key_mode=ColumnKeyMode.ISO_DATE`` to get one column per calendar day.
    """
    seen: set[str] = set()
    columns: list[DayColumn] = []
    skipped: list[date] = []

    for day in iter_days(period.start, period.end):
        key = column_key(day, key_mode)
        if key in seen:
            skipped.append(day)
            continue
        seen.add(key)
        columns.append(DayColumn.for_date(day, key=key))

    if skipped:
        logger.warning(
            "Collapsed %d day(s) sharing a day-of-month key in %s..%s: %s",
            len(skipped),
            period.start.isoformat(),
            period.end.isoformat(),
            ", ".join(d.isoformat() for d in skipped),
        )
    return tuple(columns)
