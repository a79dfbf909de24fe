from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Tuple, Union

from ..core.exceptions import FormatError

DateLike = Union[date, datetime]


def normalize(value: DateLike) -> date:
    """Reduce a date or datetime to its calendar day in local civil time.

    Aware datetimes are converted to the local timezone first so the day is
    the one shown on the user's wall calendar.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Unsupported date value type: {type(value)!r}")


def add_days(value: DateLike, days: int) -> date:
    try:
        return normalize(value) + timedelta(days=int(days))
    except OverflowError as exc:
        raise FormatError(f"Date out of range: {value!r} + {days} days") from exc


def days_between(start: DateLike, end: DateLike) -> int:
    """Signed number of days from ``start`` to ``end``.

    Uses proleptic Gregorian ordinals, so there is no DST or UTC offset drift.
    """

    return normalize(end).toordinal() - normalize(start).toordinal()


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return normalize(a) == normalize(b)


def format_iso_date(value: DateLike) -> str:
    d = normalize(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Raises FormatError on a wrong segment count, a non-numeric segment or an
    impossible day-of-month.
    """

    if not isinstance(value, str):
        raise FormatError(f"Invalid date: {value!r}")

    parts = value.strip().split("-")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise FormatError(f"Invalid date (YYYY-MM-DD): {value!r}")

    try:
        return date(int(parts[0]), int(parts[1]), int(parts[2]))
    except ValueError as exc:
        raise FormatError(f"Date does not exist: {value!r}") from exc


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Return the (year, month) that is ``offset`` months away."""

    if not 1 <= int(month) <= 12:
        raise FormatError(f"Month must be between 1 and 12, got {month!r}")
    index = year * 12 + (month - 1) + int(offset)
    return index // 12, index % 12 + 1


def format_month_title(year: int, month: int) -> str:
    return date(year, month, 1).strftime("%B %Y")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
