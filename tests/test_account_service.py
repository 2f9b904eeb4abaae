from __future__ import annotations

import pytest

from hr_admin.core.enums import Role
from hr_admin.core.exceptions import NotFoundError, ValidationError


def _payload(**overrides):
    data = {
        "title": "Ms",
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@example.com",
        "role": "User",
        "status": "Active",
    }
    data.update(overrides)
    return data


def test_create_account(container):
    account = container.account_service.create_account(_payload())

    assert account.role == Role.USER
    assert container.accounts_repo.get("jane@example.com") == account


def test_missing_fields_are_reported_per_field(container):
    with pytest.raises(ValidationError) as exc:
        container.account_service.create_account({"email": "jane@example.com"})

    assert exc.value.errors == {
        "title": "Title is required",
        "firstName": "First name is required",
        "lastName": "Last name is required",
        "role": "Role is required",
        "status": "Status is required",
    }


@pytest.mark.parametrize("email", ["plain", "a@b", "a b@c.d", "@example.com"])
def test_invalid_email_format(container, email):
    with pytest.raises(ValidationError) as exc:
        container.account_service.create_account(_payload(email=email))
    assert exc.value.errors["email"] == "Invalid email format"


def test_duplicate_email_rejected_on_create_without_store_write(container):
    before = container.accounts_repo.list_all()

    with pytest.raises(ValidationError) as exc:
        container.account_service.create_account(_payload(email="admin@example.com"))

    assert exc.value.errors["email"] == "Email already exists"
    assert container.accounts_repo.list_all() == before


def test_update_does_not_recheck_uniqueness(container):
    updated = container.account_service.update_account(
        "admin@example.com", _payload(email="admin@example.com", firstName="Root", role="Admin")
    )

    assert updated.first_name == "Root"
    assert container.accounts_repo.get("admin@example.com").first_name == "Root"


def test_update_cannot_change_email(container):
    with pytest.raises(ValidationError):
        container.account_service.update_account("admin@example.com", _payload(email="other@example.com"))


def test_update_unknown_account(container):
    with pytest.raises(NotFoundError):
        container.account_service.update_account("ghost@example.com", _payload(email="ghost@example.com"))


def test_available_accounts_exclude_linked_ones(container):
    container.account_service.create_account(_payload())

    available = [a.email for a in container.account_service.list_available()]

    assert available == ["jane@example.com"]


def test_deleting_account_orphans_employee_reference(container):
    assert container.account_service.delete_account("admin@example.com") is True
    assert container.account_service.delete_account("admin@example.com") is False

    employee = container.employee_service.get_employee("EMP001")
    assert employee.account == "admin@example.com"
    view = {e["id"]: e for e in container.employee_service.list_view()}
    assert view["EMP001"]["accountDisplay"] == "admin@example.com"
