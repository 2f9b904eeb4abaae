from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Department:
    """Department keyed by name.

    The employee count is never stored here; see ``DepartmentService``.
    """

    name: str
    description: str

    def to_dict(self) -> dict:
        return {"name": self.name, "description": self.description}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Department":
        return cls(name=data["name"], description=data.get("description", ""))
