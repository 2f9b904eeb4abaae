from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import ActiveStatus, Role


@dataclass(frozen=True)
class Account:
    """Login account, keyed by email."""

    email: str
    title: str
    first_name: str
    last_name: str
    role: Role
    status: ActiveStatus

    @property
    def display_name(self) -> str:
        return f"{self.title} {self.first_name} {self.last_name} ({self.role.value})"

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "role": self.role.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        return cls(
            email=data["email"],
            title=data["title"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            role=Role(data["role"]),
            status=ActiveStatus(data["status"]),
        )
