"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the grid logic lives in the services.
"""

import importlib

from config import get_settings_module

from src.attendance_grid.attendance_grid.columns.model import Period
from src.attendance_grid.attendance_grid.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(employees_path=settings.EMPLOYEES_PATH)

    # November 2024; month is zero-based
    grid = container.grid_service.build_grid(Period.for_month(2024, 10))
    for row in grid.rows:
        print(row.employee.name, row.totals())


if __name__ == "__main__":
    main()
