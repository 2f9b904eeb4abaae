from __future__ import annotations

from datetime import date

import pytest

from hr_admin.core.exceptions import NotFoundError, ValidationError


def test_counts_are_derived_from_employees(container):
    counts = {d["name"]: d["employeeCount"] for d in container.department_service.list_with_counts()}

    assert counts == {"Engineering": 1, "Marketing": 1, "Human Resources": 0}


def test_counts_follow_transfers(container):
    svc = container.department_service
    container.employee_service.transfer("EMP001", "Marketing", on=date(2025, 5, 1))
    container.employee_service.transfer("EMP002", "Engineering", on=date(2025, 5, 2))

    assert svc.employee_count("Engineering") == 1
    assert svc.employee_count("Marketing") == 1

    container.employee_service.transfer("EMP002", "Marketing", on=date(2025, 5, 3))

    expected = sum(1 for e in container.employees_repo.list_all() if e.department == "Engineering")
    assert svc.employee_count("Engineering") == expected == 0
    assert svc.get_with_count("Marketing")["employeeCount"] == 2
    assert "employeeCount" not in container.departments_repo.get("Marketing").to_dict()


def test_create_requires_fields_and_unique_name(container):
    svc = container.department_service
    with pytest.raises(ValidationError) as exc:
        svc.create_department({"name": "", "description": ""})
    assert exc.value.errors == {"name": "Department name is required", "description": "Description is required"}

    with pytest.raises(ValidationError) as exc:
        svc.create_department({"name": "Engineering", "description": "again"})
    assert exc.value.errors["name"] == "Department already exists"


def test_update_and_delete(container):
    svc = container.department_service
    svc.create_department({"name": "Finance", "description": "Money"})

    assert svc.update_department("Finance", {"description": "Budgets"}).description == "Budgets"
    with pytest.raises(ValidationError):
        svc.update_department("Finance", {"name": "Accounting", "description": "x"})
    with pytest.raises(NotFoundError):
        svc.update_department("Nowhere", {"description": "x"})

    assert svc.delete_department("Finance") is True
    assert svc.delete_department("Finance") is False


def test_deleting_department_leaves_employees(container):
    container.department_service.delete_department("Engineering")

    assert container.employee_service.get_employee("EMP001").department == "Engineering"
    assert container.department_service.all_counts()["Engineering"] == 1
