from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from ..core.enums import ApprovalStatus


@dataclass(frozen=True)
class TransferRecord:
    """Audit record of a department move.

    The move itself is applied when the record is created; ``status`` is advisory.
    """

    id: str
    employee_id: str
    from_department: str
    to_department: str
    date: str
    status: ApprovalStatus = ApprovalStatus.PENDING

    def with_status(self, status: ApprovalStatus) -> "TransferRecord":
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "fromDepartment": self.from_department,
            "toDepartment": self.to_department,
            "date": self.date,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransferRecord":
        return cls(
            id=data["id"],
            employee_id=data["employeeId"],
            from_department=data["fromDepartment"],
            to_department=data["toDepartment"],
            date=data["date"],
            status=ApprovalStatus(data.get("status") or ApprovalStatus.PENDING.value),
        )
