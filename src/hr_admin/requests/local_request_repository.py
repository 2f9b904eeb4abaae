from __future__ import annotations

from typing import Sequence

from ..core.constants import STORAGE_KEY_REQUESTS
from ..storage.defaults import DEFAULT_REQUESTS
from ..storage.kv_repository import KeyValueRepository
from ..storage.local_storage import LocalStorage
from .model import EmployeeRequest
from .repository import RequestRepository


class LocalRequestRepository(KeyValueRepository[EmployeeRequest], RequestRepository):
    def __init__(self, storage: LocalStorage):
        super().__init__(
            storage,
            STORAGE_KEY_REQUESTS,
            decode=EmployeeRequest.from_dict,
            encode=EmployeeRequest.to_dict,
            key_of=lambda r: r.id,
            seed=DEFAULT_REQUESTS,
        )

    def list_for_employee(self, employee_id: str) -> Sequence[EmployeeRequest]:
        return self.filter(lambda r: r.employee_id == employee_id)
