from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from ..core.exceptions import PersistenceError
from .base import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):
    """Key-value area kept in a single JSON object on local disk.

    Writes go to a sibling ``.tmp`` file that then replaces the original, so a
    crash mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_area(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeError) as exc:
            raise PersistenceError(f"Cannot read {self._path}: {exc}") from exc
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise PersistenceError(f"Corrupt storage file {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PersistenceError(f"Corrupt storage file {self._path}: expected an object")
        return data

    def load(self, key: str) -> Optional[str]:
        value = self._read_area().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            # Hand-edited files may hold the list itself.
            return json.dumps(value, ensure_ascii=False)
        return value

    def save(self, key: str, value: str) -> None:
        try:
            area = self._read_area()
        except PersistenceError:
            logger.warning("Storage file %s is unreadable; rewriting it from scratch", self._path)
            area = {}
        area[key] = value

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(area, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp.replace(self._path)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._path}: {exc}") from exc
