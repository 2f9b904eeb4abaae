from __future__ import annotations

from ..core.constants import STORAGE_KEY_DEPARTMENTS
from ..storage.defaults import DEFAULT_DEPARTMENTS
from ..storage.kv_repository import KeyValueRepository
from ..storage.local_storage import LocalStorage
from .model import Department
from .repository import DepartmentRepository


class LocalDepartmentRepository(KeyValueRepository[Department], DepartmentRepository):
    def __init__(self, storage: LocalStorage):
        super().__init__(
            storage,
            STORAGE_KEY_DEPARTMENTS,
            decode=Department.from_dict,
            encode=Department.to_dict,
            key_of=lambda d: d.name,
            seed=DEFAULT_DEPARTMENTS,
        )
