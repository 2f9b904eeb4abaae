from __future__ import annotations

from typing import Protocol

from ..core.store import EntityStore
from .model import Account


class AccountRepository(EntityStore[Account, str], Protocol):
    """Account collection keyed by email.

    Note (DIP): services depend on this interface, never on a concrete backend.
    """
