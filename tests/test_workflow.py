from __future__ import annotations

from datetime import date

import pytest

from hr_admin.core.enums import ApprovalStatus, RequestType, WorkflowKind
from hr_admin.core.exceptions import NotFoundError
from hr_admin.requests.model import EmployeeRequest, RequestItem
from hr_admin.transfers.model import TransferRecord
from hr_admin.workflow.timeline import build_timeline, paginate


def _transfer(id_, date_, employee_id="EMP001", src="Engineering", dst="Marketing", status=ApprovalStatus.PENDING):
    return TransferRecord(
        id=id_, employee_id=employee_id, from_department=src, to_department=dst, date=date_, status=status
    )


def _request(id_, date_, employee_id="EMP001"):
    return EmployeeRequest(
        id=id_,
        type=RequestType.EQUIPMENT,
        employee_id=employee_id,
        description="Need gear",
        request_date=date_,
        items=(RequestItem("Laptop", 1), RequestItem("Mouse", 2)),
        status=ApprovalStatus.APPROVED,
    )


def test_timeline_sorted_newest_first():
    items = build_timeline(
        "EMP001",
        [_transfer("TRF001", "2025-03-01")],
        [_request("REQ001", "2025-02-01")],
        "Marketing",
        hire_date="2025-01-01",
    )

    assert [i.id for i in items] == ["TRF001", "REQ001", "onboarding"]
    onboarding = items[-1]
    assert onboarding.type == WorkflowKind.ONBOARDING
    assert onboarding.status == ApprovalStatus.APPROVED
    assert onboarding.details == "OnBoarding on Engineering"
    assert onboarding.date == "2025-01-01"


def test_details_and_actions():
    transfer, request, _ = build_timeline(
        "EMP001",
        [_transfer("TRF001", "2025-03-01")],
        [_request("REQ001", "2025-02-01")],
        "Marketing",
        hire_date="2025-01-01",
    )

    assert transfer.details == "Employee Transferred From Engineering to Marketing"
    assert transfer.actions == (ApprovalStatus.PENDING, ApprovalStatus.APPROVED, ApprovalStatus.DISAPPROVED)
    assert request.details == "Requested Equipment: Laptop x 1, Mouse x 2"
    assert request.description == "Need gear"
    assert request.actions == ()


def test_other_employees_records_are_filtered_out():
    items = build_timeline(
        "EMP001",
        [_transfer("TRF001", "2025-03-01", employee_id="EMP002")],
        [_request("REQ001", "2025-02-01", employee_id="EMP002")],
        "Engineering",
        today=date(2025, 6, 1),
    )

    assert [(i.id, i.date, i.details) for i in items] == [("onboarding", "2025-06-01", "OnBoarding on Engineering")]


def test_equal_dates_keep_input_order_and_bad_dates_sink():
    items = build_timeline(
        "EMP001",
        [_transfer("TRF001", "2025-03-01"), _transfer("TRF002", "not-a-date")],
        [_request("REQ001", "2025-03-01")],
        "Marketing",
        hire_date="2025-03-01",
    )

    assert [i.id for i in items] == ["onboarding", "TRF001", "REQ001", "TRF002"]


def test_paginate():
    items = build_timeline(
        "EMP001",
        [_transfer(f"TRF00{n}", f"2025-03-0{n}") for n in range(1, 7)],
        [],
        "Marketing",
        hire_date="2025-01-01",
    )

    first = paginate(items, 0, 5)
    second = paginate(items, 1, 5)

    assert first.total == second.total == 7
    assert [i.id for i in first.items] == ["TRF006", "TRF005", "TRF004", "TRF003", "TRF002"]
    assert [i.id for i in second.items] == ["TRF001", "onboarding"]
    assert paginate(items, 9, 5).items == []


def test_service_timeline_and_status_change(container):
    container.employee_service.transfer("EMP001", "Marketing", on=date(2025, 5, 1))

    page = container.workflow_service.page("EMP001")
    assert [i.id for i in page.items] == ["TRF001", "REQ002", "onboarding"]
    assert page.items[-1].details == "OnBoarding on Engineering"

    container.workflow_service.change_transfer_status("TRF001", ApprovalStatus.APPROVED)

    timeline = container.workflow_service.timeline("EMP001")
    assert timeline[0].status == ApprovalStatus.APPROVED
    assert container.employee_service.get_employee("EMP001").department == "Marketing"


def test_service_unknown_employee_or_transfer(container):
    with pytest.raises(NotFoundError):
        container.workflow_service.timeline("EMP404")
    with pytest.raises(NotFoundError):
        container.workflow_service.change_transfer_status("TRF404", "Approved")
