from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from ..core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

E = TypeVar("E")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value or ""))


class FieldErrors:
    """Collects field-level messages and raises them together."""

    def __init__(self) -> None:
        self._errors: Dict[str, str] = {}

    def __bool__(self) -> bool:
        return bool(self._errors)

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, message)

    def require(self, data: Mapping[str, Any], field: str, label: str) -> Optional[str]:
        value = data.get(field)
        if value is None or not str(value).strip():
            self.add(field, f"{label} is required")
            return None
        return str(value).strip()

    def choice(self, value: Optional[str], field: str, enum_cls: Type[E]) -> Optional[E]:
        if value is None:
            return None
        try:
            return enum_cls(value)  # type: ignore[call-arg]
        except ValueError:
            self.add(field, f"Invalid {field}: {value}")
            return None

    def raise_if_any(self, message: str = "Validation failed") -> None:
        if self._errors:
            raise ValidationError(message, self._errors)
