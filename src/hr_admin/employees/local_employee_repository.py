from __future__ import annotations

from typing import Sequence

from ..core.constants import STORAGE_KEY_EMPLOYEES
from ..storage.defaults import DEFAULT_EMPLOYEES
from ..storage.kv_repository import KeyValueRepository
from ..storage.local_storage import LocalStorage
from .model import Employee
from .repository import EmployeeRepository


class LocalEmployeeRepository(KeyValueRepository[Employee], EmployeeRepository):
    def __init__(self, storage: LocalStorage):
        super().__init__(
            storage,
            STORAGE_KEY_EMPLOYEES,
            decode=Employee.from_dict,
            encode=Employee.to_dict,
            key_of=lambda e: e.id,
            seed=DEFAULT_EMPLOYEES,
        )

    def list_by_department(self, department: str) -> Sequence[Employee]:
        return self.filter(lambda e: e.department == department)
