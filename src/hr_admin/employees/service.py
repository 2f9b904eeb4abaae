from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, List, Mapping, Optional

from ..accounts.repository import AccountRepository
from ..common.datetime_utils import today_local, try_parse_iso_date
from ..common.identifiers import format_id, next_id_max_suffix, parse_suffix
from ..common.validators import FieldErrors
from ..core.constants import EMPLOYEE_ID_PREFIX, TRANSFER_ID_PREFIX
from ..core.enums import ActiveStatus, ApprovalStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..departments.repository import DepartmentRepository
from ..transfers.model import TransferRecord
from ..transfers.repository import TransferRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees and move them between departments."""

    def __init__(
        self,
        employees: EmployeeRepository,
        accounts: AccountRepository,
        departments: DepartmentRepository,
        transfers: TransferRepository,
    ):
        self._employees = employees
        self._accounts = accounts
        self._departments = departments
        self._transfers = transfers

    def next_employee_id(self) -> str:
        return next_id_max_suffix(EMPLOYEE_ID_PREFIX, [e.id for e in self._employees.list_all()])

    def list_view(self) -> List[dict]:
        """Employees joined with their account display name."""

        accounts = {a.email: a for a in self._accounts.list_all()}
        out: List[dict] = []
        for e in self._employees.list_all():
            account = accounts.get(e.account)
            out.append({**e.to_dict(), "accountDisplay": account.display_name if account else e.account})
        return out

    def list_by_department(self, department: str) -> List[Employee]:
        return list(self._employees.list_by_department(department))

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _validate(self, data: Mapping[str, Any], *, employee_id: str, current_account: Optional[str]) -> Employee:
        errors = FieldErrors()
        account = errors.require(data, "account", "Account")
        position = errors.require(data, "position", "Position")
        department = errors.require(data, "department", "Department")
        hire_date = errors.require(data, "hireDate", "Hire date")
        status = errors.choice(errors.require(data, "status", "Status"), "status", ActiveStatus)

        if hire_date and not try_parse_iso_date(hire_date):
            errors.add("hireDate", "Hire date must be YYYY-MM-DD")
        if department and not self._departments.get(department):
            errors.add("department", "Unknown department")
        if account and account != current_account:
            if not self._accounts.get(account):
                errors.add("account", "Unknown account")
            elif any(e.account == account for e in self._employees.list_all()):
                errors.add("account", "Account is already assigned to an employee")
        errors.raise_if_any("Invalid employee")

        return Employee(
            id=employee_id,
            account=account,
            department=department,
            position=position,
            hire_date=hire_date,
            status=status,
        )

    def create_employee(self, data: Mapping[str, Any]) -> Employee:
        employee_id = str(data.get("id") or "").strip() or self.next_employee_id()
        suffix = parse_suffix(EMPLOYEE_ID_PREFIX, employee_id)
        if suffix is None or format_id(EMPLOYEE_ID_PREFIX, suffix) != employee_id:
            raise ValidationError("Invalid employee", {"id": f"Employee ID must look like {EMPLOYEE_ID_PREFIX}001"})
        if self._employees.get(employee_id):
            raise ValidationError("Invalid employee", {"id": "Employee ID already exists"})

        employee = self._validate(data, employee_id=employee_id, current_account=None)
        self._employees.add(employee)
        logger.info("Employee %s created (%s)", employee.id, employee.department)
        return employee

    def update_employee(self, employee_id: str, data: Mapping[str, Any]) -> Employee:
        current = self.get_employee(employee_id)
        employee = self._validate(data, employee_id=employee_id, current_account=current.account)
        if not self._employees.update(employee):
            raise NotFoundError("Employee not found")
        logger.info("Employee %s updated", employee_id)
        return employee

    def delete_employee(self, employee_id: str) -> bool:
        """Remove the employee only; their transfers and requests stay on record."""

        deleted = self._employees.delete(employee_id)
        if deleted:
            logger.info("Employee %s deleted", employee_id)
        return deleted

    def transfer(self, employee_id: str, to_department: str, *, on: Optional[date] = None) -> TransferRecord:
        """Move the employee now and record the move as a Pending transfer.

        Approval of the record is audit-only: the department change is not
        contingent on it and is never reverted by a status change.
        """

        employee = self.get_employee(employee_id)
        to_department = (to_department or "").strip()
        if not to_department:
            raise ValidationError("Invalid transfer", {"toDepartment": "New department is required"})
        if to_department == employee.department:
            raise ValidationError("Invalid transfer", {"toDepartment": "Employee is already in this department"})
        if not self._departments.get(to_department):
            raise ValidationError("Invalid transfer", {"toDepartment": "Unknown department"})

        record = TransferRecord(
            id=next_id_max_suffix(TRANSFER_ID_PREFIX, [t.id for t in self._transfers.list_all()]),
            employee_id=employee.id,
            from_department=employee.department,
            to_department=to_department,
            date=(on or today_local()).strftime("%Y-%m-%d"),
            status=ApprovalStatus.PENDING,
        )
        self._transfers.add(record)
        self._employees.update(replace(employee, department=to_department))
        logger.info("Employee %s transferred %s -> %s (%s)", employee.id, record.from_department, to_department, record.id)
        return record
