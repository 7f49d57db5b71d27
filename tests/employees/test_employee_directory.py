from __future__ import annotations

from datetime import date

import pytest

from src.workforce_records.workforce_records.core.exceptions import NotFoundError, ValidationError
from src.workforce_records.workforce_records.database.memory import InMemoryRepository
from src.workforce_records.workforce_records.employees.service import EmployeeDirectory


@pytest.fixture
def repo():
    return InMemoryRepository()


@pytest.fixture
def directory(repo, clock):
    return EmployeeDirectory(repo, clock=clock)


def test_add_with_and_without_id(directory):
    named = directory.add(employee_id="u1", name="  Lan ", hourly_rate=20, hire_date="2023-06-01")
    generated = directory.add(name="Minh", hourly_rate=18.5, department="Kho")

    assert named.name == "Lan"
    assert named.hire_date == date(2023, 6, 1)
    assert generated.employee_id
    assert directory.get(generated.employee_id).department == "Kho"


def test_duplicate_id_rejected(directory):
    directory.add(employee_id="u1", name="Lan", hourly_rate=20)

    with pytest.raises(ValidationError):
        directory.add(employee_id="u1", name="Khác", hourly_rate=30)

    assert directory.hourly_rate("u1") == 20


@pytest.mark.parametrize("rate", [-5, float("nan"), float("inf"), None, "x"])
def test_invalid_rate_rejected_without_writing(directory, repo, rate):
    with pytest.raises(ValidationError):
        directory.add(name="Lan", hourly_rate=rate)

    assert repo.save_count == 0


def test_update_rate_and_clear_department(directory):
    emp = directory.add(employee_id="u1", name="Lan", hourly_rate=20, department="Kho")

    directory.update(emp.employee_id, {"hourlyRate": 22, "department": " "})

    updated = directory.get("u1")
    assert updated.hourly_rate == 22
    assert updated.department is None

    with pytest.raises(ValidationError):
        directory.update("u1", {"id": "u2"})


def test_delete_is_idempotent(directory, repo):
    directory.add(employee_id="u1", name="Lan", hourly_rate=20)

    directory.delete("u1")
    saves = repo.save_count
    directory.delete("u1")

    assert repo.save_count == saves
    with pytest.raises(NotFoundError):
        directory.get("u1")


def test_rates_follow_name_order(directory):
    directory.add(employee_id="b", name="Bình", hourly_rate=15)
    directory.add(employee_id="a", name="an", hourly_rate=10)

    assert [e.employee_id for e in directory.all_employees()] == ["a", "b"]
    assert directory.rates() == {"a": 10, "b": 15}


def test_record_uses_wire_names(directory):
    emp = directory.add(employee_id="u1", name="Lan", hourly_rate=20, hire_date=date(2023, 6, 1))

    record = emp.to_record()

    assert record == {"id": "u1", "name": "Lan", "hourlyRate": 20.0, "hireDate": "2023-06-01"}
    assert type(emp).from_record(record) == emp
