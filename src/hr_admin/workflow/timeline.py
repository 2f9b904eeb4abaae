"""Merge onboarding, transfers and requests into one date-sorted timeline."""
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..common.datetime_utils import today_local, try_parse_iso_date
from ..core.constants import ONBOARDING_ENTRY_ID
from ..core.enums import ApprovalStatus, WorkflowKind
from ..requests.model import EmployeeRequest
from ..transfers.model import TransferRecord
from .model import WorkflowItem, WorkflowPage

TRANSFER_ACTIONS = (ApprovalStatus.PENDING, ApprovalStatus.APPROVED, ApprovalStatus.DISAPPROVED)


def _onboarding(department: str, on: str) -> WorkflowItem:
    return WorkflowItem(
        id=ONBOARDING_ENTRY_ID,
        type=WorkflowKind.ONBOARDING,
        date=on,
        details=f"OnBoarding on {department}",
        description="",
        status=ApprovalStatus.APPROVED,
    )


def _from_transfer(t: TransferRecord) -> WorkflowItem:
    return WorkflowItem(
        id=t.id,
        type=WorkflowKind.TRANSFER,
        date=t.date,
        details=f"Employee Transferred From {t.from_department} to {t.to_department}",
        description="",
        status=t.status or ApprovalStatus.PENDING,
        actions=TRANSFER_ACTIONS,
    )


def _from_request(r: EmployeeRequest) -> WorkflowItem:
    return WorkflowItem(
        id=r.id,
        type=WorkflowKind.REQUEST,
        date=r.request_date,
        details=f"Requested {r.type.value}: {r.summary()}",
        description=r.description,
        status=r.status,
    )


def _sort_key(item: WorkflowItem) -> date:
    return try_parse_iso_date(item.date) or date.min


def build_timeline(
    employee_id: str,
    transfers: Iterable[TransferRecord],
    requests: Iterable[EmployeeRequest],
    department: str,
    *,
    hire_date: Optional[str] = None,
    today: Optional[date] = None,
) -> List[WorkflowItem]:
    """Return the employee's workflow, newest first.

    The onboarding entry is synthetic and never stored. It is dated on the
    hire date when known (today otherwise) and names the department the
    employee started in: the source of their earliest transfer, or the
    current department if they never moved. It does not follow later
    transfers, so after a move it differs from ``department``. Entries with
    equal dates keep input order (onboarding, transfers, requests);
    unparseable dates sort last.
    """

    own_transfers = [t for t in transfers if t.employee_id == employee_id]
    own_requests = [r for r in requests if r.employee_id == employee_id]

    start_department = department
    if own_transfers:
        earliest = min(own_transfers, key=lambda t: try_parse_iso_date(t.date) or date.max)
        start_department = earliest.from_department

    onboarding_date = hire_date or (today or today_local()).strftime("%Y-%m-%d")
    items = [_onboarding(start_department, onboarding_date)]
    items.extend(_from_transfer(t) for t in own_transfers)
    items.extend(_from_request(r) for r in own_requests)

    return sorted(items, key=_sort_key, reverse=True)


def paginate(items: Sequence[WorkflowItem], page: int, page_size: int) -> WorkflowPage:
    page = max(0, int(page))
    page_size = max(1, int(page_size))
    start = page * page_size
    return WorkflowPage(items=list(items[start:start + page_size]), page=page, page_size=page_size, total=len(items))
