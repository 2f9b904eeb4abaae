from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class EntityStore(Protocol[T, K]):
    """Collection contract shared by every record kind.

    Mutations either rewrite the whole collection (key-value backend) or touch a
    single row (MySQL backend); callers cannot tell the difference.
    """

    def list_all(self) -> Sequence[T]:
        raise NotImplementedError

    def replace_all(self, items: Sequence[T]) -> None:
        raise NotImplementedError

    def get(self, key: K) -> Optional[T]:
        raise NotImplementedError

    def add(self, item: T) -> None:
        raise NotImplementedError

    def update(self, item: T) -> bool:
        """Replace the record with the same key. No-op (False) if it is missing."""

        raise NotImplementedError

    def delete(self, key: K) -> bool:
        """Remove the record with ``key``. Deleting a missing key changes nothing."""

        raise NotImplementedError
