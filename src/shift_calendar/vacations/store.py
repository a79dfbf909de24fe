from __future__ import annotations

import json
import logging
import threading
import time
import uuid
from datetime import date, timedelta
from typing import Callable, Dict, List, Optional, Sequence

from ..common.datetime_utils import DateLike, format_iso_date, normalize
from ..common.validators import require_date, require_label, require_ordered_range
from ..core.constants import DEFAULT_STORAGE_KEY
from ..core.exceptions import FormatError, NotFoundError, PersistenceError
from ..storage.base import KeyValueStorage
from .model import VacationRecord

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _new_id() -> str:
    return uuid.uuid4().hex


class VacationStore:
    """Owns every VacationRecord of a session.

    Each mutation builds a new list, writes the whole collection to storage
    and only then swaps it in, so a failed write leaves the previous contents
    untouched. Mutations are serialized with a lock.

    Overlapping vacations are allowed. For any day the record with the
    greatest ``created_at`` wins; equal timestamps fall back to insertion
    order (later wins).
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        id_factory: Callable[[], str] = _new_id,
        clock_ms: Callable[[], int] = _now_ms,
    ):
        self._storage = storage
        self._key = key
        self._id_factory = id_factory
        self._clock_ms = clock_ms
        self._lock = threading.RLock()
        self._records: List[VacationRecord] = []
        self.load_warning: Optional[str] = None
        self.load()

    # ── persistence ──────────────────────────────────────────────────────

    def load(self) -> Sequence[VacationRecord]:
        """(Re)read the collection from storage.

        Corrupt or unreadable storage degrades to an empty collection; the
        reason is logged and kept in ``load_warning``.
        """

        with self._lock:
            self.load_warning = None
            try:
                self._records = self._read()
            except PersistenceError as exc:
                self._records = []
                self.load_warning = str(exc)
                logger.warning("Vacation data could not be loaded, starting empty: %s", exc)
            return tuple(self._records)

    def _read(self) -> List[VacationRecord]:
        try:
            raw = self._storage.load(self._key)
        except (OSError, UnicodeError) as exc:
            raise PersistenceError(f"Cannot read vacations: {exc}") from exc
        if raw is None or not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise PersistenceError(f"Vacation data is not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise PersistenceError("Vacation data must be a list")

        records: List[VacationRecord] = []
        seen_ids = set()
        for item in data:
            if not isinstance(item, dict):
                raise PersistenceError(f"Vacation entry is not an object: {item!r}")
            try:
                record = VacationRecord.from_dict(item)
            except (KeyError, TypeError, ValueError, FormatError) as exc:
                raise PersistenceError(f"Malformed vacation entry {item!r}: {exc}") from exc
            if record.vacation_id in seen_ids:
                raise PersistenceError(f"Duplicate vacation id {record.vacation_id!r}")
            seen_ids.add(record.vacation_id)
            records.append(record)
        return records

    def _commit(self, records: List[VacationRecord]) -> None:
        payload = json.dumps([r.to_dict() for r in records], ensure_ascii=False)
        try:
            self._storage.save(self._key, payload)
        except PersistenceError as exc:
            logger.warning("Vacation change rolled back, storage write failed: %s", exc)
            raise
        except OSError as exc:
            logger.warning("Vacation change rolled back, storage write failed: %s", exc)
            raise PersistenceError(f"Cannot write vacations: {exc}") from exc
        self._records = records

    # ── validation ───────────────────────────────────────────────────────

    @staticmethod
    def validate(label: Optional[str], start_date: Optional[date], end_date: Optional[date]) -> None:
        """Raise ValidationError for the first failing check.

        Order: EMPTY_LABEL, MISSING_DATE, INVERTED_RANGE.
        """

        require_label(label)
        start = require_date(start_date, "Start date")
        end = require_date(end_date, "End date")
        require_ordered_range(normalize(start), normalize(end))

    # ── mutations ────────────────────────────────────────────────────────

    def create(
        self,
        label: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
        notes: Optional[str] = None,
    ) -> VacationRecord:
        self.validate(label, start_date, end_date)
        with self._lock:
            record = VacationRecord(
                vacation_id=self._fresh_id(),
                label=label.strip(),
                start_date=normalize(start_date),
                end_date=normalize(end_date),
                notes=(notes or "").strip(),
                created_at=self._next_created_at(),
            )
            self._commit(self._records + [record])
        logger.info(
            "Vacation %s created (%s..%s)",
            record.vacation_id,
            format_iso_date(record.start_date),
            format_iso_date(record.end_date),
        )
        return record

    def update(
        self,
        vacation_id: str,
        label: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
        notes: Optional[str] = None,
    ) -> VacationRecord:
        self.validate(label, start_date, end_date)
        with self._lock:
            index = self._index_of(vacation_id)
            if index is None:
                raise NotFoundError(f"Vacation {vacation_id!r} not found")

            current = self._records[index]
            updated = VacationRecord(
                vacation_id=current.vacation_id,
                label=label.strip(),
                start_date=normalize(start_date),
                end_date=normalize(end_date),
                notes=(notes or "").strip(),
                created_at=current.created_at,
            )
            records = list(self._records)
            records[index] = updated
            self._commit(records)
        logger.info(
            "Vacation %s updated (%s..%s)",
            updated.vacation_id,
            format_iso_date(updated.start_date),
            format_iso_date(updated.end_date),
        )
        return updated

    def delete(self, vacation_id: str) -> bool:
        with self._lock:
            index = self._index_of(vacation_id)
            if index is None:
                return False
            records = list(self._records)
            del records[index]
            self._commit(records)
        logger.info("Vacation %s deleted", vacation_id)
        return True

    def _next_created_at(self) -> int:
        # Never earlier than an existing record, even if the wall clock steps back.
        now = int(self._clock_ms())
        return max([now] + [r.created_at for r in self._records])

    def _fresh_id(self) -> str:
        existing = {r.vacation_id for r in self._records}
        while True:
            candidate = self._id_factory()
            if candidate not in existing:
                return candidate

    def _index_of(self, vacation_id: str) -> Optional[int]:
        for i, record in enumerate(self._records):
            if record.vacation_id == vacation_id:
                return i
        return None

    # ── queries ──────────────────────────────────────────────────────────

    def get(self, vacation_id: str) -> Optional[VacationRecord]:
        index = self._index_of(vacation_id)
        return self._records[index] if index is not None else None

    def list_all(self) -> List[VacationRecord]:
        """All records by start date, then by precedence."""

        ranked = self._by_precedence()
        order = {r.vacation_id: i for i, r in enumerate(ranked)}
        return sorted(ranked, key=lambda r: (r.start_date, order[r.vacation_id]))

    def __len__(self) -> int:
        return len(self._records)

    def _by_precedence(self) -> List[VacationRecord]:
        """Records from lowest to highest precedence."""

        ranked = sorted(enumerate(self._records), key=lambda pair: (pair[1].created_at, pair[0]))
        return [record for _, record in ranked]

    def vacation_for(self, day: DateLike) -> Optional[VacationRecord]:
        target = normalize(day)
        winner: Optional[VacationRecord] = None
        for record in self._by_precedence():
            if record.contains(target):
                winner = record
        return winner

    def vacations_overlapping(self, range_start: DateLike, range_end: DateLike) -> Dict[str, VacationRecord]:
        """Winning record per ISO date inside ``[range_start, range_end]``.

        Same answer as calling vacation_for on each day, in one pass.
        """

        start = normalize(range_start)
        end = normalize(range_end)
        result: Dict[str, VacationRecord] = {}
        if start > end:
            return result

        # Ascending precedence: later writes overwrite weaker records.
        for record in self._by_precedence():
            lo = max(record.start_date, start)
            hi = min(record.end_date, end)
            for offset in range((hi - lo).days + 1):
                result[format_iso_date(lo + timedelta(days=offset))] = record
        return result
