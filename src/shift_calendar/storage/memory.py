from __future__ import annotations

from typing import Dict, Optional

from .base import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Process-local storage; nothing survives a restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def save(self, key: str, value: str) -> None:
        self._items[key] = value
