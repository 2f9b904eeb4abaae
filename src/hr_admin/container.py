from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .accounts.local_account_repository import LocalAccountRepository
from .accounts.mysql_account_repository import MySQLAccountRepository
from .accounts.repository import AccountRepository
from .accounts.service import AccountService
from .core.constants import DEFAULT_WORKFLOW_PAGE_SIZE
from .database.connection import DatabaseConnection, DBConfig
from .departments.local_department_repository import LocalDepartmentRepository
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.local_employee_repository import LocalEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .requests.local_request_repository import LocalRequestRepository
from .requests.mysql_request_repository import MySQLRequestRepository
from .requests.repository import RequestRepository
from .requests.service import RequestService
from .storage.local_storage import LocalStorage
from .transfers.local_transfer_repository import LocalTransferRepository
from .transfers.mysql_transfer_repository import MySQLTransferRepository
from .transfers.repository import TransferRepository
from .transfers.service import TransferService
from .workflow.service import WorkflowService

BACKEND_MYSQL = "mysql"
BACKEND_MEMORY = "memory"


@dataclass(frozen=True)
class Container:
    accounts_repo: AccountRepository
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    transfers_repo: TransferRepository
    requests_repo: RequestRepository

    account_service: AccountService
    department_service: DepartmentService
    employee_service: EmployeeService
    transfer_service: TransferService
    request_service: RequestService
    workflow_service: WorkflowService


def _wire(
    accounts_repo: AccountRepository,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    transfers_repo: TransferRepository,
    requests_repo: RequestRepository,
    *,
    page_size: int,
) -> Container:
    employee_service = EmployeeService(employees_repo, accounts_repo, departments_repo, transfers_repo)
    transfer_service = TransferService(transfers_repo)
    request_service = RequestService(requests_repo, employees_repo)

    return Container(
        accounts_repo=accounts_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        transfers_repo=transfers_repo,
        requests_repo=requests_repo,
        account_service=AccountService(accounts_repo, employees_repo),
        department_service=DepartmentService(departments_repo, employees_repo),
        employee_service=employee_service,
        transfer_service=transfer_service,
        request_service=request_service,
        workflow_service=WorkflowService(employee_service, transfer_service, request_service, page_size=page_size),
    )


def build_local_container(
    storage: Optional[LocalStorage] = None,
    *,
    storage_file: Optional[Union[str, Path]] = None,
    page_size: int = DEFAULT_WORKFLOW_PAGE_SIZE,
) -> Container:
    storage = storage if storage is not None else LocalStorage(storage_file)
    return _wire(
        LocalAccountRepository(storage),
        LocalDepartmentRepository(storage),
        LocalEmployeeRepository(storage),
        LocalTransferRepository(storage),
        LocalRequestRepository(storage),
        page_size=page_size,
    )


def build_mysql_container(*, db_config: Mapping[str, Any], page_size: int = DEFAULT_WORKFLOW_PAGE_SIZE) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return _wire(
        MySQLAccountRepository(conn),
        MySQLDepartmentRepository(conn),
        MySQLEmployeeRepository(conn),
        MySQLTransferRepository(conn),
        MySQLRequestRepository(conn),
        page_size=page_size,
    )


def build_container(
    *,
    backend: str = BACKEND_MYSQL,
    db_config: Optional[Mapping[str, Any]] = None,
    storage_file: Optional[Union[str, Path]] = None,
    page_size: int = DEFAULT_WORKFLOW_PAGE_SIZE,
) -> Container:
    if backend == BACKEND_MEMORY:
        return build_local_container(storage_file=storage_file, page_size=page_size)
    if backend == BACKEND_MYSQL:
        if db_config is None:
            raise ValueError("db_config is required for the mysql backend")
        return build_mysql_container(db_config=db_config, page_size=page_size)
    raise ValueError(f"Unknown storage backend: {backend!r}")
