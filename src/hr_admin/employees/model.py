from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import ActiveStatus


@dataclass(frozen=True)
class Employee:
    id: str
    account: str
    department: str
    position: str
    hire_date: str
    status: ActiveStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "account": self.account,
            "position": self.position,
            "department": self.department,
            "hireDate": self.hire_date,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            id=data["id"],
            account=data["account"],
            department=data["department"],
            position=data["position"],
            hire_date=data["hireDate"],
            status=ActiveStatus(data["status"]),
        )
