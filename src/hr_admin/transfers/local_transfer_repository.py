from __future__ import annotations

from typing import Sequence

from ..core.constants import STORAGE_KEY_TRANSFERS
from ..storage.defaults import DEFAULT_TRANSFERS
from ..storage.kv_repository import KeyValueRepository
from ..storage.local_storage import LocalStorage
from .model import TransferRecord
from .repository import TransferRepository


class LocalTransferRepository(KeyValueRepository[TransferRecord], TransferRepository):
    def __init__(self, storage: LocalStorage):
        super().__init__(
            storage,
            STORAGE_KEY_TRANSFERS,
            decode=TransferRecord.from_dict,
            encode=TransferRecord.to_dict,
            key_of=lambda t: t.id,
            seed=DEFAULT_TRANSFERS,
        )

    def list_for_employee(self, employee_id: str) -> Sequence[TransferRecord]:
        return self.filter(lambda t: t.employee_id == employee_id)
