from __future__ import annotations

import json

import pytest

from config import testing
from src.attendance_grid.attendance_grid.attendance.controller import period_from_args
from src.attendance_grid.attendance_grid.core.exceptions import InvalidPeriod, ValidationError
from src.attendance_grid.attendance_grid.main import create_app


@pytest.fixture
def client(tmp_path, monkeypatch):
    path = tmp_path / "employees.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "name": "A", "leaves": "01,02"},
                {"id": 2, "name": "B", "leaves": "05"},
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(testing, "EMPLOYEES_PATH", str(path))

    app = create_app()
    return app.test_client()


def test_grid_for_month(client):
    resp = client.get("/api/attendance/grid?year=2024&month=10")

    assert resp.status_code == 200
    data = resp.get_json()
    assert len(data["headers"]) == 30
    assert [r["id"] for r in data["rows"]] == [1, 2]
    assert data["rows"][0]["cells"][0]["status"] == "ABSENT"
    assert data["rows"][0]["cells"][1]["status"] == "NON_WORKING"


def test_grid_for_date_range_and_employee(client):
    resp = client.get("/api/attendance/grid?start=2024-11-04&end=2024-11-08&employee_id=2")

    assert resp.status_code == 200
    data = resp.get_json()
    assert [h["key"] for h in data["headers"]] == ["04", "05", "06", "07", "08"]
    assert [c["marker"] for c in data["rows"][0]["cells"]] == ["P", "A", "P", "P", "P"]


@pytest.mark.parametrize(
    "query",
    [
        "year=2024&month=12",
        "year=2024&month=abc",
        "start=2024-11-08&end=2024-11-01",
        "start=2024-11-08",
        "start=2024-13-01&end=2024-13-02",
        "year=2024&month=10&key_mode=week",
        "year=2024&month=10&employee_id=99",
    ],
)
def test_invalid_query_is_bad_request(client, query):
    resp = client.get(f"/api/attendance/grid?{query}")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_grid_csv(client):
    resp = client.get("/api/attendance/grid.csv?start=2024-11-01&end=2024-11-03")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attendance_20241101_20241103.csv" in resp.headers["Content-Disposition"]
    text = resp.data.decode("utf-8-sig")
    assert text.splitlines()[0] == "ID,Name,01,02,03"


def test_missing_data_file_is_server_error(client, tmp_path, monkeypatch):
    container = client.application.extensions["attendance_grid"]
    monkeypatch.setattr(container.employees_repo, "_path", tmp_path / "gone.json")

    resp = client.get("/api/attendance/grid?year=2024&month=10")

    assert resp.status_code == 500


def test_period_defaults_to_current_month(monkeypatch):
    from datetime import date

    from src.attendance_grid.attendance_grid.attendance import controller

    monkeypatch.setattr(controller, "today_local", lambda: date(2024, 2, 10))

    period = period_from_args({})

    assert period.start == date(2024, 2, 1)
    assert period.end == date(2024, 2, 29)


def test_period_from_args_errors_are_validation_errors():
    with pytest.raises(InvalidPeriod):
        period_from_args({"start": "2024-11-01"})
    with pytest.raises(ValidationError):
        period_from_args({"year": "x", "month": "1"})


def test_grid_for_last_supported_month(client):
    resp = client.get("/api/attendance/grid?year=9999&month=11")

    assert resp.status_code == 200
    assert resp.get_json()["headers"][-1]["date"] == "9999-12-31"


def test_unreadable_data_path_is_json_server_error(client, tmp_path, monkeypatch):
    container = client.application.extensions["attendance_grid"]
    monkeypatch.setattr(container.employees_repo, "_path", tmp_path)

    resp = client.get("/api/attendance/grid?year=2024&month=10")

    assert resp.status_code == 500
    assert resp.get_json()["success"] is False
