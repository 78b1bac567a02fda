from __future__ import annotations

import json

import pytest

from src.attendance_grid.attendance_grid.core.exceptions import DataSourceError, ValidationError
from src.attendance_grid.attendance_grid.employees.json_employee_repository import JsonEmployeeRepository
from src.attendance_grid.attendance_grid.employees.model import Employee


def _write(tmp_path, payload) -> str:
    path = tmp_path / "employees.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_list_employees_maps_records(tmp_path):
    path = _write(
        tmp_path,
        [
            {"id": 1, "name": "A", "leaves": "05, 12"},
            {"id": 2, "name": "B"},
        ],
    )

    employees = JsonEmployeeRepository(path).list_employees()

    assert employees == [
        Employee(employee_id=1, name="A", leaves="05, 12"),
        Employee(employee_id=2, name="B", leaves=""),
    ]


def test_get_by_id(tmp_path):
    repo = JsonEmployeeRepository(_write(tmp_path, [{"id": 3, "name": "C", "leaves": ""}]))

    assert repo.get_by_id(3).name == "C"
    assert repo.get_by_id(4) is None


@pytest.mark.parametrize(
    "payload",
    [
        {"id": 1, "name": "A"},
        ["not an object"],
        [{"name": "no id"}],
        [{"id": "1", "name": "string id"}],
        [{"id": 1}],
        [{"id": 1, "name": "A", "leaves": ["05"]}],
        [{"id": 1, "name": "A", "leaves": []}],
        [{"id": 1, "name": "A", "leaves": 0}],
        [{"id": 1, "name": "A", "leaves": False}],
        [{"id": 1, "name": "A", "leaves": 5}],
    ],
)
def test_malformed_records_are_rejected(tmp_path, payload):
    repo = JsonEmployeeRepository(_write(tmp_path, payload))

    with pytest.raises(ValidationError):
        repo.list_employees()


def test_missing_file_raises_data_source_error(tmp_path):
    with pytest.raises(DataSourceError):
        JsonEmployeeRepository(tmp_path / "missing.json").list_employees()


def test_invalid_json_raises_data_source_error(tmp_path):
    path = tmp_path / "employees.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(DataSourceError):
        JsonEmployeeRepository(path).list_employees()


@pytest.mark.parametrize(
    "content",
    [
        b'[{"id": 1, "name": "\xff\xfe"}]',
        b"\xff\xfe\x00",
    ],
)
def test_undecodable_file_raises_data_source_error(tmp_path, content):
    path = tmp_path / "employees.json"
    path.write_bytes(content)

    with pytest.raises(DataSourceError):
        JsonEmployeeRepository(path).list_employees()


def test_directory_path_raises_data_source_error(tmp_path):
    with pytest.raises(DataSourceError):
        JsonEmployeeRepository(tmp_path).list_employees()


def test_bundled_fixture_loads():
    from config import testing

    employees = JsonEmployeeRepository(testing.BASE_DIR / "data" / "employees.json").list_employees()

    assert employees
    assert all(isinstance(e.employee_id, int) for e in employees)


def test_leave_tokens_are_trimmed_and_skip_blanks():
    employee = Employee(employee_id=1, name="A", leaves=" 05 ,12,, ,x ")

    assert employee.leave_tokens() == frozenset({"05", "12", "x"})
    assert Employee(employee_id=2, name="B", leaves="").leave_tokens() == frozenset()
