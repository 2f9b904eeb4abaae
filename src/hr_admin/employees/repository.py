from __future__ import annotations

from typing import Protocol, Sequence

from ..core.store import EntityStore
from .model import Employee


class EmployeeRepository(EntityStore[Employee, str], Protocol):
    def list_by_department(self, department: str) -> Sequence[Employee]:
        raise NotImplementedError
