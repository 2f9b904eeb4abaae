from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..core.enums import ApprovalStatus, WorkflowKind


@dataclass(frozen=True)
class WorkflowItem:
    """One row of an employee's workflow timeline."""

    id: str
    type: WorkflowKind
    date: str
    details: str
    description: str
    status: ApprovalStatus
    actions: Tuple[ApprovalStatus, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "date": self.date,
            "details": self.details,
            "description": self.description,
            "status": self.status.value,
            "actions": [a.value for a in self.actions],
        }


@dataclass(frozen=True)
class WorkflowPage:
    items: List[WorkflowItem] = field(default_factory=list)
    page: int = 0
    page_size: int = 5
    total: int = 0

    def to_dict(self) -> dict:
        return {
            "items": [i.to_dict() for i in self.items],
            "page": self.page,
            "pageSize": self.page_size,
            "total": self.total,
        }
