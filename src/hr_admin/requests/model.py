from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Tuple

from ..core.enums import ApprovalStatus, RequestType


@dataclass(frozen=True)
class RequestItem:
    name: str
    quantity: int = 1

    @classmethod
    def of(cls, name: str, quantity: Any = 1) -> "RequestItem":
        try:
            qty = int(quantity)
        except (TypeError, ValueError):
            qty = 1
        return cls(name=name, quantity=max(1, qty))

    def incremented(self) -> "RequestItem":
        return replace(self, quantity=self.quantity + 1)

    def decremented(self) -> "RequestItem":
        return replace(self, quantity=max(1, self.quantity - 1))

    def label(self) -> str:
        return f"{self.name} x {self.quantity}"

    def to_dict(self) -> dict:
        return {"name": self.name, "quantity": self.quantity}


@dataclass(frozen=True)
class EmployeeRequest:
    """Equipment / leave / resources request raised for an employee."""

    id: str
    type: RequestType
    employee_id: str
    description: str
    request_date: str
    items: Tuple[RequestItem, ...]
    status: ApprovalStatus = ApprovalStatus.PENDING

    def with_status(self, status: ApprovalStatus) -> "EmployeeRequest":
        return replace(self, status=status)

    def summary(self) -> str:
        return ", ".join(item.label() for item in self.items)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "employeeId": self.employee_id,
            "description": self.description,
            "requestDate": self.request_date,
            "items": [item.to_dict() for item in self.items],
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmployeeRequest":
        return cls(
            id=data["id"],
            type=RequestType(data["type"]),
            employee_id=data["employeeId"],
            description=data.get("description", ""),
            request_date=data["requestDate"],
            items=tuple(RequestItem.of(i["name"], i.get("quantity", 1)) for i in data.get("items", [])),
            status=ApprovalStatus(data.get("status") or ApprovalStatus.PENDING.value),
        )
