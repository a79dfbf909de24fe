from __future__ import annotations

from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple

from ..common.datetime_utils import DateLike, format_month_title, normalize, shift_month, today_local
from ..core.constants import WEEKDAYS
from ..core.exceptions import NotFoundError
from ..shifts.clock import ShiftClock
from ..vacations.model import VacationRecord
from ..vacations.store import VacationStore
from .grid import build_month, make_cell
from .model import DayCell, DayDetail, MonthView


class ScheduleService:
    """Engine facade consumed by the UI layer.

    "Today" is taken from ``today_provider`` unless the caller passes it in,
    so tests can pin it.
    """

    def __init__(
        self,
        vacations: VacationStore,
        clock: ShiftClock,
        *,
        today_provider: Callable[[], date] = today_local,
    ):
        self._vacations = vacations
        self._clock = clock
        self._today_provider = today_provider

    def _today(self, today: Optional[DateLike]) -> date:
        return normalize(today) if today is not None else self._today_provider()

    # Read side

    def get_month_grid(self, year: int, month: int, *, today: Optional[DateLike] = None) -> List[DayCell]:
        return build_month(int(year), int(month), self._today(today), self._clock, self._vacations)

    def get_month_view(self, year: int, month: int, *, today: Optional[DateLike] = None) -> MonthView:
        cells = self.get_month_grid(year, month, today=today)
        return MonthView(
            year=int(year),
            month=int(month),
            title=format_month_title(int(year), int(month)),
            weekdays=WEEKDAYS,
            cells=cells,
        )

    def get_day_detail(self, day: DateLike, *, today: Optional[DateLike] = None) -> DayDetail:
        target = normalize(day)
        today_d = self._today(today)
        role = self._clock.role_for(target, self._clock.anchor_for(today_d))
        vacation = self._vacations.vacation_for(target)
        cell = make_cell(target, role, vacation, self._clock, is_outside=False, is_today=(target == today_d))
        return DayDetail(
            day=target,
            role=role,
            vacation=vacation,
            is_today=cell.is_today,
            display_label=cell.display_label,
            caption=cell.caption,
        )

    def navigate(self, year: Optional[int] = None, month: Optional[int] = None, offset: int = 0) -> Tuple[int, int]:
        """Month reached by prev (-1) / next (+1); no year/month means "today"."""

        if year is None or month is None:
            current = self._today_provider()
            return current.year, current.month
        return shift_month(int(year), int(month), int(offset))

    def list_vacations(self) -> Sequence[VacationRecord]:
        return self._vacations.list_all()

    def get_vacation(self, vacation_id: str) -> VacationRecord:
        record = self._vacations.get(vacation_id)
        if record is None:
            raise NotFoundError(f"Vacation {vacation_id!r} not found")
        return record

    @property
    def load_warning(self) -> Optional[str]:
        return self._vacations.load_warning

    # Write side

    def create_vacation(
        self,
        label: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
        notes: Optional[str] = None,
    ) -> VacationRecord:
        return self._vacations.create(label, start_date, end_date, notes)

    def update_vacation(
        self,
        vacation_id: str,
        label: Optional[str],
        start_date: Optional[date],
        end_date: Optional[date],
        notes: Optional[str] = None,
    ) -> VacationRecord:
        return self._vacations.update(vacation_id, label, start_date, end_date, notes)

    def delete_vacation(self, vacation_id: str) -> bool:
        return self._vacations.delete(vacation_id)
