from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Local key-value persistence area (string values)."""

    def load(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent.

        Raises PersistenceError when the area cannot be read.
        """

        raise NotImplementedError

    def save(self, key: str, value: str) -> None:
        """Replace the value stored under ``key``.

        Raises PersistenceError when the area cannot be written.
        """

        raise NotImplementedError
