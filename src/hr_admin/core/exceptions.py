from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps a field name to its message so callers can show them inline.
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.errors = dict(errors or {})


class NotFoundError(DomainError):
    """Raised when an entity lookup by key yields nothing."""


class PersistenceError(DomainError):
    """Raised when the storage backend cannot complete an operation."""
