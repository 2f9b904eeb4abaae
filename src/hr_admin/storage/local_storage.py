from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class LocalStorage:
    """String key -> JSON text store, the server-side stand-in for browser storage.

    Values live in memory. When ``path`` is given, every write is mirrored to
    that JSON file and the file is read back on construction.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self._items: Dict[str, str] = {}
        self._path = Path(path) if path else None
        if self._path and self._path.exists():
            self._load()

    def _load(self) -> None:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Cannot read storage file {self._path}") from e
        self._items = {str(k): str(v) for k, v in data.items()}
        logger.debug("Loaded %d storage keys from %s", len(self._items), self._path)

    def _flush(self, items: Dict[str, str]) -> None:
        if not self._path:
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(items, indent=2), encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot write storage file {self._path}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        # The new mapping replaces the old one only after the mirror write succeeded.
        items = {**self._items, key: value}
        self._flush(items)
        self._items = items

    def __contains__(self, key: object) -> bool:
        return key in self._items
