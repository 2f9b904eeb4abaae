from __future__ import annotations

from ..core.constants import STORAGE_KEY_ACCOUNTS
from ..storage.defaults import DEFAULT_ACCOUNTS
from ..storage.kv_repository import KeyValueRepository
from ..storage.local_storage import LocalStorage
from .model import Account
from .repository import AccountRepository


class LocalAccountRepository(KeyValueRepository[Account], AccountRepository):
    def __init__(self, storage: LocalStorage):
        super().__init__(
            storage,
            STORAGE_KEY_ACCOUNTS,
            decode=Account.from_dict,
            encode=Account.to_dict,
            key_of=lambda a: a.email,
            seed=DEFAULT_ACCOUNTS,
        )
