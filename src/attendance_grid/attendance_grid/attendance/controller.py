from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.datastructures import MultiDict

from ..columns.model import Period
from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import optional_int
from ..container import Container
from ..core.enums import ColumnKeyMode
from ..core.exceptions import DomainError, InvalidPeriod, ValidationError

logger = logging.getLogger(__name__)


def period_from_args(args: MultiDict) -> Period:
    """Resolve the reporting period from query parameters.

    ``start``/``end`` (YYYY-MM-DD) take priority over ``year``/``month``
    (zero-based). With neither, the current month is used.
    """
    start_s = (args.get("start") or "").strip()
    end_s = (args.get("end") or "").strip()
    if start_s or end_s:
        if not start_s or not end_s:
            raise InvalidPeriod("start and end must be given together")
        try:
            return Period(start=parse_iso_date(start_s), end=parse_iso_date(end_s))
        except ValueError:
            raise InvalidPeriod("start/end must be dates (YYYY-MM-DD)")

    today = today_local()
    year = optional_int(args.get("year"), "year")
    month = optional_int(args.get("month"), "month")
    return Period.for_month(
        today.year if year is None else year,
        today.month - 1 if month is None else month,
    )


def key_mode_from_args(args: MultiDict) -> ColumnKeyMode:
    value = (args.get("key_mode") or ColumnKeyMode.DAY_OF_MONTH.value).strip().lower()
    try:
        return ColumnKeyMode(value)
    except ValueError:
        raise ValidationError("key_mode must be 'day' or 'date'")


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/api/attendance/grid", methods=["GET"], endpoint="attendance_grid")
    def attendance_grid():
        try:
            period = period_from_args(request.args)
            data = container.grid_service.build_grid_ui(
                period,
                employee_id=optional_int(request.args.get("employee_id"), "employee_id"),
                key_mode=key_mode_from_args(request.args),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except DomainError:
            logger.exception("Failed to build attendance grid")
            return _error("Could not build the attendance grid", 500)
        return jsonify(data), 200

    @app.route("/api/attendance/grid.csv", methods=["GET"], endpoint="attendance_grid_csv")
    def attendance_grid_csv():
        try:
            period = period_from_args(request.args)
            text = container.grid_service.export_csv(
                period,
                employee_id=optional_int(request.args.get("employee_id"), "employee_id"),
                key_mode=key_mode_from_args(request.args),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except DomainError:
            logger.exception("Failed to export attendance grid")
            return _error("Could not export the attendance grid", 500)

        filename = f"attendance_{period.start.strftime('%Y%m%d')}_{period.end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            text.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
