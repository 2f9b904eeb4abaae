"""Fixed records used to seed an empty store (both backends)."""
from __future__ import annotations

from ..accounts.model import Account
from ..core.enums import ActiveStatus, ApprovalStatus, RequestType, Role
from ..departments.model import Department
from ..employees.model import Employee
from ..requests.model import EmployeeRequest, RequestItem
from ..transfers.model import TransferRecord

DEFAULT_ACCOUNTS = (
    Account(
        email="admin@example.com",
        title="Mr",
        first_name="Admin",
        last_name="User",
        role=Role.ADMIN,
        status=ActiveStatus.ACTIVE,
    ),
    Account(
        email="employee@example.com",
        title="Mr",
        first_name="Employee",
        last_name="User",
        role=Role.USER,
        status=ActiveStatus.ACTIVE,
    ),
)

DEFAULT_DEPARTMENTS = (
    Department(name="Engineering", description="Software development team"),
    Department(name="Marketing", description="Marketing and communications team"),
    Department(name="Human Resources", description="HR management and recruitment"),
)

DEFAULT_EMPLOYEES = (
    Employee(
        id="EMP001",
        account="admin@example.com",
        department="Engineering",
        position="Developer",
        hire_date="2025-01-01",
        status=ActiveStatus.ACTIVE,
    ),
    Employee(
        id="EMP002",
        account="employee@example.com",
        department="Marketing",
        position="Designer",
        hire_date="2025-02-01",
        status=ActiveStatus.ACTIVE,
    ),
)

DEFAULT_TRANSFERS: tuple[TransferRecord, ...] = ()

DEFAULT_REQUESTS = (
    EmployeeRequest(
        id="REQ001",
        type=RequestType.EQUIPMENT,
        employee_id="EMP002",
        description="Need laptop for development work",
        request_date="2025-03-15",
        items=(RequestItem("Laptop", 1),),
        status=ApprovalStatus.PENDING,
    ),
    EmployeeRequest(
        id="REQ002",
        type=RequestType.LEAVE,
        employee_id="EMP001",
        description="Annual vacation",
        request_date="2025-03-10",
        items=(RequestItem("Vacation", 5),),
        status=ApprovalStatus.APPROVED,
    ),
)
