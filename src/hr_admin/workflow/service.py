from __future__ import annotations

from typing import List, Union

from ..core.constants import DEFAULT_WORKFLOW_PAGE_SIZE
from ..core.enums import ApprovalStatus
from ..employees.service import EmployeeService
from ..requests.service import RequestService
from ..transfers.model import TransferRecord
from ..transfers.service import TransferService
from .model import WorkflowItem, WorkflowPage
from .timeline import build_timeline, paginate


class WorkflowService:
    """Use case: an employee's combined onboarding / transfer / request history."""

    def __init__(
        self,
        employees: EmployeeService,
        transfers: TransferService,
        requests: RequestService,
        *,
        page_size: int = DEFAULT_WORKFLOW_PAGE_SIZE,
    ):
        self._employees = employees
        self._transfers = transfers
        self._requests = requests
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def timeline(self, employee_id: str) -> List[WorkflowItem]:
        employee = self._employees.get_employee(employee_id)
        return build_timeline(
            employee.id,
            self._transfers.list_for_employee(employee.id),
            self._requests.list_for_employee(employee.id),
            employee.department,
            hire_date=employee.hire_date,
        )

    def page(self, employee_id: str, page: int = 0) -> WorkflowPage:
        return paginate(self.timeline(employee_id), page, self._page_size)

    def change_transfer_status(self, transfer_id: str, status: Union[str, ApprovalStatus]) -> TransferRecord:
        return self._transfers.set_status(transfer_id, status)
