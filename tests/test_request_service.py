from __future__ import annotations

import pytest

from hr_admin.core.enums import ApprovalStatus, RequestType
from hr_admin.core.exceptions import NotFoundError, ValidationError
from hr_admin.requests.model import RequestItem


def _payload(**overrides):
    data = {
        "type": "Equipment",
        "employeeId": "EMP001",
        "description": "New monitor",
        "requestDate": "2025-04-01",
        "items": [{"name": "Monitor", "quantity": 2}, {"name": "Cable", "quantity": 0}],
    }
    data.update(overrides)
    return data


def test_create_request_defaults_to_pending(container):
    req = container.request_service.create_request(_payload())

    assert req.id == "REQ003"
    assert req.status == ApprovalStatus.PENDING
    assert req.type == RequestType.EQUIPMENT
    assert req.items == (RequestItem("Monitor", 2), RequestItem("Cable", 1))


def test_next_id_uses_highest_suffix_after_reorder(container):
    repo = container.requests_repo
    repo.replace_all(list(reversed(repo.list_all())))

    assert container.request_service.next_request_id() == "REQ003"


def test_resources_is_a_canonical_type(container):
    req = container.request_service.create_request(_payload(type="Resources"))
    assert req.type == RequestType.RESOURCES


def test_validation_errors(container):
    with pytest.raises(ValidationError) as exc:
        container.request_service.create_request(
            _payload(type="Snacks", employeeId="EMP404", description="", items=[{"name": ""}])
        )

    assert exc.value.errors == {
        "type": "Invalid type: Snacks",
        "employeeId": "Unknown employee",
        "description": "Description is required",
        "items.0": "Item name is required",
    }


def test_items_are_required(container):
    with pytest.raises(ValidationError) as exc:
        container.request_service.create_request(_payload(items=[]))
    assert "items" in exc.value.errors


def test_quantity_clamps_at_one():
    item = RequestItem.of("Chair", 1)

    assert item.decremented().quantity == 1
    assert item.incremented().incremented().decremented().quantity == 2
    assert RequestItem.of("Chair", -4).quantity == 1
    assert RequestItem.of("Chair", "x").quantity == 1


def test_update_and_status_change(container):
    svc = container.request_service
    updated = svc.update_request("REQ001", _payload(employeeId="EMP002", description="Two laptops"))

    assert updated.description == "Two laptops"
    assert updated.status == ApprovalStatus.PENDING

    approved = svc.set_status("REQ001", "Approved")
    assert container.requests_repo.get("REQ001").status == ApprovalStatus.APPROVED
    assert approved.description == "Two laptops"

    with pytest.raises(ValidationError):
        svc.set_status("REQ001", "Maybe")
    with pytest.raises(NotFoundError):
        svc.set_status("REQ404", "Approved")


def test_update_keeps_orphaned_employee_reference(container):
    container.employees_repo.delete("EMP002")

    updated = container.request_service.update_request("REQ001", _payload(employeeId="EMP002"))

    assert updated.employee_id == "EMP002"


def test_delete_request(container):
    svc = container.request_service
    assert svc.delete_request("REQ001") is True
    assert svc.delete_request("REQ001") is False
    assert [r.id for r in svc.list_requests()] == ["REQ002"]

