from __future__ import annotations

import json
from typing import Any, Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

from .local_storage import LocalStorage

T = TypeVar("T")


class KeyValueRepository(Generic[T]):
    """Entity store persisted as one JSON array under a single storage key.

    The key is seeded with ``seed`` the first time it is read. Every mutation
    loads the full array, changes it and writes it back whole.
    """

    def __init__(
        self,
        storage: LocalStorage,
        key: str,
        *,
        decode: Callable[[Any], T],
        encode: Callable[[T], Any],
        key_of: Callable[[T], str],
        seed: Iterable[T] = (),
    ):
        self._storage = storage
        self._key = key
        self._decode = decode
        self._encode = encode
        self._key_of = key_of
        self._seed = tuple(seed)

    def _load(self) -> List[T]:
        raw = self._storage.get_item(self._key)
        if raw is None:
            items = list(self._seed)
            self._save(items)
            return items
        return [self._decode(d) for d in json.loads(raw)]

    def _save(self, items: Sequence[T]) -> None:
        self._storage.set_item(self._key, json.dumps([self._encode(i) for i in items]))

    def list_all(self) -> Sequence[T]:
        return self._load()

    def replace_all(self, items: Sequence[T]) -> None:
        self._save(list(items))

    def get(self, key: str) -> Optional[T]:
        for item in self._load():
            if self._key_of(item) == key:
                return item
        return None

    def add(self, item: T) -> None:
        items = self._load()
        items.append(item)
        self._save(items)

    def update(self, item: T) -> bool:
        items = self._load()
        key = self._key_of(item)
        for i, existing in enumerate(items):
            if self._key_of(existing) == key:
                items[i] = item
                self._save(items)
                return True
        return False

    def delete(self, key: str) -> bool:
        items = self._load()
        kept = [i for i in items if self._key_of(i) != key]
        if len(kept) == len(items):
            return False
        self._save(kept)
        return True

    def filter(self, predicate: Callable[[T], bool]) -> Sequence[T]:
        return [i for i in self._load() if predicate(i)]
