from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Mapping

from ..common.validators import FieldErrors
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Department
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use case: manage departments.

    Employee counts are a projection over the employee collection and are
    recomputed on every read; nothing caches or stores them.
    """

    def __init__(self, departments: DepartmentRepository, employees: EmployeeRepository):
        self._departments = departments
        self._employees = employees

    def all_counts(self) -> Dict[str, int]:
        return dict(Counter(e.department for e in self._employees.list_all()))

    def employee_count(self, name: str) -> int:
        return sum(1 for e in self._employees.list_all() if e.department == name)

    def list_with_counts(self) -> List[dict]:
        counts = self.all_counts()
        return [{**d.to_dict(), "employeeCount": counts.get(d.name, 0)} for d in self._departments.list_all()]

    def get_department(self, name: str) -> Department:
        department = self._departments.get(name)
        if not department:
            raise NotFoundError("Department not found")
        return department

    def get_with_count(self, name: str) -> dict:
        department = self.get_department(name)
        return {**department.to_dict(), "employeeCount": self.employee_count(name)}

    @staticmethod
    def _validate(data: Mapping[str, Any]) -> FieldErrors:
        errors = FieldErrors()
        errors.require(data, "name", "Department name")
        errors.require(data, "description", "Description")
        return errors

    def create_department(self, data: Mapping[str, Any]) -> Department:
        errors = self._validate(data)
        name = str(data.get("name") or "").strip()
        if name and self._departments.get(name):
            errors.add("name", "Department already exists")
        errors.raise_if_any("Invalid department")

        department = Department(name=name, description=str(data["description"]).strip())
        self._departments.add(department)
        logger.info("Department %s created", name)
        return department

    def update_department(self, name: str, data: Mapping[str, Any]) -> Department:
        self.get_department(name)
        if data.get("name") and str(data["name"]).strip() != name:
            raise ValidationError("Invalid department", {"name": "Department name cannot be changed"})

        errors = self._validate({**data, "name": name})
        errors.raise_if_any("Invalid department")

        department = Department(name=name, description=str(data["description"]).strip())
        if not self._departments.update(department):
            raise NotFoundError("Department not found")
        logger.info("Department %s updated", name)
        return department

    def delete_department(self, name: str) -> bool:
        """Remove the department. Employees that reference it are not touched."""

        deleted = self._departments.delete(name)
        if deleted:
            logger.info("Department %s deleted", name)
        return deleted
