from __future__ import annotations

from typing import Protocol, Sequence

from ..core.store import EntityStore
from .model import EmployeeRequest


class RequestRepository(EntityStore[EmployeeRequest, str], Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[EmployeeRequest]:
        """Requests raised for one employee, in stored order."""

        raise NotImplementedError
