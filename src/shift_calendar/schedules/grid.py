from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional, Protocol, Tuple

from ..common.datetime_utils import DateLike, days_in_month, format_iso_date, normalize, shift_month
from ..core.constants import GRID_CELLS, VACATION_CAPTION
from ..core.enums import ShiftRole
from ..core.exceptions import FormatError
from ..shifts.clock import ShiftClock
from ..vacations.model import VacationRecord
from .model import DayCell

logger = logging.getLogger(__name__)


class VacationLookup(Protocol):
    def vacations_overlapping(self, range_start: DateLike, range_end: DateLike) -> Dict[str, VacationRecord]:
        raise NotImplementedError


def _sunday_based_weekday(day: date) -> int:
    # date.weekday(): Monday=0 .. Sunday=6
    return (day.weekday() + 1) % 7


def grid_dates(year: int, month: int) -> List[Tuple[date, bool]]:
    """(date, is_outside) for the 42 cells of a Sunday-first 6-row grid."""

    if not 1 <= int(month) <= 12:
        raise FormatError(f"Month must be between 1 and 12, got {month!r}")

    try:
        first_of_month = date(year, month, 1)
        start_weekday = _sunday_based_weekday(first_of_month)
        month_days = days_in_month(year, month)
        prev_year, prev_month = shift_month(year, month, -1)
        next_year, next_month = shift_month(year, month, 1)
        prev_month_days = days_in_month(prev_year, prev_month)

        cells = []
        for i in range(GRID_CELLS):
            day_number = i - start_weekday + 1
            if day_number < 1:
                cells.append((date(prev_year, prev_month, prev_month_days + day_number), True))
            elif day_number > month_days:
                cells.append((date(next_year, next_month, day_number - month_days), True))
            else:
                cells.append((date(year, month, day_number), False))
    except ValueError as exc:
        # Padded grid leaves the supported 0001-01-01..9999-12-31 range.
        raise FormatError(f"Month {year:04d}-{month:02d} is outside the supported calendar range") from exc
    return cells


def build_month(
    year: int,
    month: int,
    today: DateLike,
    clock: ShiftClock,
    vacations: Optional[VacationLookup] = None,
) -> List[DayCell]:
    today_d = normalize(today)
    anchor = clock.anchor_for(today_d)
    dates = grid_dates(year, month)

    overrides: Dict[str, VacationRecord] = {}
    if vacations is not None:
        overrides = vacations.vacations_overlapping(dates[0][0], dates[-1][0])

    cells: List[DayCell] = []
    for day, is_outside in dates:
        role = clock.role_for(day, anchor)
        vacation = overrides.get(format_iso_date(day))
        cells.append(make_cell(day, role, vacation, clock, is_outside=is_outside, is_today=(day == today_d)))

    logger.debug("Built grid %04d-%02d (anchor=%s, overrides=%d)", year, month, anchor, len(overrides))
    return cells


def make_cell(
    day: date,
    role: ShiftRole,
    vacation: Optional[VacationRecord],
    clock: ShiftClock,
    *,
    is_outside: bool,
    is_today: bool,
) -> DayCell:
    if vacation is not None:
        label, caption = vacation.label, VACATION_CAPTION
    else:
        profile = clock.profile(role)
        label, caption = profile.name, profile.hours_label
    return DayCell(
        day=day,
        role=role,
        vacation=vacation,
        is_outside=is_outside,
        is_today=is_today,
        display_label=label,
        caption=caption,
    )
