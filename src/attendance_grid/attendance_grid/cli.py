"""Print an attendance grid without going through Flask."""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Optional, Sequence

from config import get_settings_module

from .columns.model import Period
from .common.datetime_utils import parse_iso_date
from .container import build_container
from .core.enums import ColumnKeyMode
from .core.exceptions import DomainError


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="attendance_grid", description=__doc__)
    parser.add_argument("--year", type=int)
    parser.add_argument("--month", type=int, help="zero-based month index (0 = January)")
    parser.add_argument("--start", type=parse_iso_date, help="YYYY-MM-DD")
    parser.add_argument("--end", type=parse_iso_date, help="YYYY-MM-DD")
    parser.add_argument("--employees", help="path to the employees JSON file")
    parser.add_argument("--key-mode", choices=[m.value for m in ColumnKeyMode], default=ColumnKeyMode.DAY_OF_MONTH.value)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if (args.start is None) != (args.end is None):
        parser.error("--start and --end must be given together")
    if args.start is None and (args.year is None or args.month is None):
        parser.error("give --year and --month, or --start and --end")

    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(employees_path=args.employees or settings.EMPLOYEES_PATH)
    try:
        if args.start is not None:
            period = Period(start=args.start, end=args.end)
        else:
            period = Period.for_month(args.year, args.month)
        print(container.grid_service.export_csv(period, key_mode=ColumnKeyMode(args.key_mode)), end="")
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
