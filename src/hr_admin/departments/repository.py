from __future__ import annotations

from typing import Protocol

from ..core.store import EntityStore
from .model import Department


class DepartmentRepository(EntityStore[Department, str], Protocol):
    """Department collection keyed by name."""
