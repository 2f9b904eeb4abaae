from __future__ import annotations

from typing import Protocol, Sequence

from ..core.store import EntityStore
from .model import TransferRecord


class TransferRepository(EntityStore[TransferRecord, str], Protocol):
    def list_for_employee(self, employee_id: str) -> Sequence[TransferRecord]:
        raise NotImplementedError
