from __future__ import annotations

import csv
import io
from typing import Optional

from ..columns.builder import build_columns
from ..columns.model import DayColumn, Period
from ..core.constants import DEFAULT_TABLE_NAME, STATUS_CSS, WEEKEND_HEADER_CSS
from ..core.enums import ColumnKeyMode
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .factory import DayStatusStrategyFactory
from .formatter import decide_row
from .model import AttendanceGrid, AttendanceRow


class AttendanceGridService:
    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        strategy_factory: DayStatusStrategyFactory | None = None,
        table_name: str = DEFAULT_TABLE_NAME,
    ):
        self._employees = employees
        self._factory = strategy_factory or DayStatusStrategyFactory()
        self._table_name = table_name

    def build_grid(
        self,
        period: Period,
        *,
        employee_id: Optional[int] = None,
        key_mode: ColumnKeyMode = ColumnKeyMode.DAY_OF_MONTH,
    ) -> AttendanceGrid:
        columns = build_columns(period, key_mode=key_mode)

        if employee_id is not None:
            employee = self._employees.get_by_id(employee_id)
            if not employee:
                raise ValidationError(f"Employee {employee_id} does not exist")
            employees = [employee]
        else:
            employees = list(self._employees.list_employees())

        rows = tuple(
            AttendanceRow(employee=e, decisions=decide_row(e, columns, strategy_factory=self._factory))
            for e in employees
        )
        return AttendanceGrid(period=period, columns=columns, rows=rows)

    def build_grid_ui(
        self,
        period: Period,
        *,
        employee_id: Optional[int] = None,
        key_mode: ColumnKeyMode = ColumnKeyMode.DAY_OF_MONTH,
    ) -> dict:
        """Grid shaped for a table renderer: one header per day, one row per employee."""
        grid = self.build_grid(period, employee_id=employee_id, key_mode=key_mode)
        return {
            "table_name": self._table_name,
            "period": grid.period.to_dict(),
            "headers": [self._header_to_ui(c) for c in grid.columns],
            "rows": [self._row_to_ui(r, grid.columns) for r in grid.rows],
        }

    def export_csv(
        self,
        period: Period,
        *,
        employee_id: Optional[int] = None,
        key_mode: ColumnKeyMode = ColumnKeyMode.DAY_OF_MONTH,
    ) -> str:
        """Grid as CSV: ID, Name, then one marker column per day."""
        grid = self.build_grid(period, employee_id=employee_id, key_mode=key_mode)

        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(["ID", "Name", *(c.key for c in grid.columns)])
        writer.writerow(["", "", *(c.day_of_week.value for c in grid.columns)])
        for r in grid.rows:
            writer.writerow(
                [r.employee.employee_id, r.employee.name, *(r.decisions[c.key].marker for c in grid.columns)]
            )
        return out.getvalue()

    @staticmethod
    def _header_to_ui(column: DayColumn) -> dict:
        return {
            "key": column.key,
            "date": column.day.isoformat(),
            "weekday": column.day_of_week.value,
            "is_weekend": column.is_weekend,
            "css_class": WEEKEND_HEADER_CSS if column.is_weekend else "",
        }

    @staticmethod
    def _row_to_ui(row: AttendanceRow, columns: tuple[DayColumn, ...]) -> dict:
        cells = []
        for column in columns:
            decision = row.decisions[column.key]
            cells.append(
                {
                    "key": column.key,
                    "status": decision.status.value,
                    "marker": decision.marker,
                    "css_class": STATUS_CSS[decision.status],
                }
            )
        return {
            "id": row.employee.employee_id,
            "name": row.employee.name,
            "cells": cells,
            "totals": row.totals(),
        }
