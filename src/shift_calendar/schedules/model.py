from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..common.datetime_utils import format_iso_date
from ..core.enums import ShiftRole
from ..vacations.model import VacationRecord


@dataclass(frozen=True)
class DayCell:
    """One cell of the month grid. Built fresh on every render."""

    day: date
    role: ShiftRole
    vacation: Optional[VacationRecord]
    is_outside: bool
    is_today: bool
    display_label: str
    caption: str

    @property
    def is_on(self) -> bool:
        return self.role == ShiftRole.ROLE_A

    @property
    def state(self) -> str:
        """Effective display state: ``vacation`` when overridden, else on/off."""
        return "vacation" if self.vacation is not None else self.role.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": format_iso_date(self.day),
            "day": self.day.day,
            "role": self.role.value,
            "state": self.state,
            "label": self.display_label,
            "caption": self.caption,
            "isOutside": self.is_outside,
            "isToday": self.is_today,
            "vacation": self.vacation.to_dict() if self.vacation else None,
        }


@dataclass(frozen=True)
class DayDetail:
    day: date
    role: ShiftRole
    vacation: Optional[VacationRecord]
    is_today: bool
    display_label: str
    caption: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": format_iso_date(self.day),
            "role": self.role.value,
            "label": self.display_label,
            "caption": self.caption,
            "isToday": self.is_today,
            "vacation": self.vacation.to_dict() if self.vacation else None,
        }


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    title: str
    weekdays: Sequence[str]
    cells: Sequence[DayCell]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "title": self.title,
            "weekdays": list(self.weekdays),
            "cells": [c.to_dict() for c in self.cells],
        }
