from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from ..common.datetime_utils import try_parse_iso_date
from ..common.identifiers import next_id_max_suffix
from ..common.validators import FieldErrors
from ..core.constants import REQUEST_ID_PREFIX
from ..core.enums import ApprovalStatus, RequestType
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..transfers.service import coerce_status
from .model import EmployeeRequest, RequestItem
from .repository import RequestRepository

logger = logging.getLogger(__name__)


class RequestService:
    def __init__(self, requests: RequestRepository, employees: EmployeeRepository):
        self._requests = requests
        self._employees = employees

    def next_request_id(self) -> str:
        return next_id_max_suffix(REQUEST_ID_PREFIX, [r.id for r in self._requests.list_all()])

    def list_requests(self) -> List[EmployeeRequest]:
        return list(self._requests.list_all())

    def list_for_employee(self, employee_id: str) -> List[EmployeeRequest]:
        return list(self._requests.list_for_employee(employee_id))

    def get_request(self, request_id: str) -> EmployeeRequest:
        req = self._requests.get(request_id)
        if not req:
            raise NotFoundError("Request not found")
        return req

    def _validate(
        self,
        data: Mapping[str, Any],
        *,
        request_id: str,
        current: Optional[EmployeeRequest] = None,
    ) -> EmployeeRequest:
        errors = FieldErrors()
        req_type = errors.choice(errors.require(data, "type", "Type"), "type", RequestType)
        employee_id = errors.require(data, "employeeId", "Employee")
        description = errors.require(data, "description", "Description")
        request_date = errors.require(data, "requestDate", "Request date")

        if request_date and not try_parse_iso_date(request_date):
            errors.add("requestDate", "Request date must be YYYY-MM-DD")
        # Existing requests may outlive their employee, so only a changed reference is checked.
        if employee_id and (current is None or current.employee_id != employee_id):
            if not self._employees.get(employee_id):
                errors.add("employeeId", "Unknown employee")

        status = ApprovalStatus.PENDING if current is None else current.status
        if data.get("status"):
            status = errors.choice(data["status"], "status", ApprovalStatus) or status

        raw_items = data.get("items") or []
        if not isinstance(raw_items, list) or not raw_items:
            errors.add("items", "At least one item is required")
            raw_items = []
        items: List[RequestItem] = []
        for index, raw in enumerate(raw_items):
            name = str(raw.get("name") or "").strip() if isinstance(raw, Mapping) else ""
            if not name:
                errors.add(f"items.{index}", "Item name is required")
                continue
            items.append(RequestItem.of(name, raw.get("quantity", 1)))
        errors.raise_if_any("Invalid request")

        return EmployeeRequest(
            id=request_id,
            type=req_type,
            employee_id=employee_id,
            description=description,
            request_date=request_date,
            items=tuple(items),
            status=status,
        )

    def create_request(self, data: Mapping[str, Any]) -> EmployeeRequest:
        req = self._validate(data, request_id=self.next_request_id())
        self._requests.add(req)
        logger.info("Request %s created for %s", req.id, req.employee_id)
        return req

    def update_request(self, request_id: str, data: Mapping[str, Any]) -> EmployeeRequest:
        current = self.get_request(request_id)
        req = self._validate(data, request_id=request_id, current=current)
        if not self._requests.update(req):
            raise NotFoundError("Request not found")
        logger.info("Request %s updated", request_id)
        return req

    def set_status(self, request_id: str, status: Union[str, ApprovalStatus]) -> EmployeeRequest:
        new_status = coerce_status(status)
        updated = self.get_request(request_id).with_status(new_status)
        if not self._requests.update(updated):
            raise NotFoundError("Request not found")
        logger.info("Request %s -> %s", request_id, new_status.value)
        return updated

    def delete_request(self, request_id: str) -> bool:
        deleted = self._requests.delete(request_id)
        if deleted:
            logger.info("Request %s deleted", request_id)
        return deleted
