from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from ..common.datetime_utils import format_iso_date, parse_iso_date


@dataclass(frozen=True)
class VacationRecord:
    """User-declared inclusive date range that overrides the shift display.

    ``vacation_id`` and ``created_at`` (milliseconds since epoch) are fixed at
    creation; an update produces a new instance carrying both over.
    """

    vacation_id: str
    label: str
    start_date: date
    end_date: date
    notes: str
    created_at: int

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.vacation_id,
            "label": self.label,
            "startDate": format_iso_date(self.start_date),
            "endDate": format_iso_date(self.end_date),
            "notes": self.notes,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VacationRecord":
        """Build a record from its persisted layout.

        Raises KeyError/TypeError/ValueError or FormatError on malformed input.
        """

        created_at = data["createdAt"]
        if isinstance(created_at, bool) or not isinstance(created_at, int):
            raise TypeError(f"createdAt must be an integer, got {created_at!r}")

        vacation_id = data["id"]
        label = data["label"]
        if not isinstance(vacation_id, str) or not vacation_id:
            raise ValueError("id must be a non-empty string")
        if not isinstance(label, str) or not label.strip():
            raise ValueError("label must be a non-empty string")

        start_date = parse_iso_date(data["startDate"])
        end_date = parse_iso_date(data["endDate"])
        if start_date > end_date:
            raise ValueError("startDate is after endDate")

        return cls(
            vacation_id=vacation_id,
            label=label,
            start_date=start_date,
            end_date=end_date,
            notes=str(data.get("notes") or ""),
            created_at=created_at,
        )
