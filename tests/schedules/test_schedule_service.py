from __future__ import annotations

from datetime import date

import pytest

from shift_calendar.container import build_container
from shift_calendar.core.constants import WEEKDAYS
from shift_calendar.core.enums import ShiftRole, ValidationReason
from shift_calendar.core.exceptions import FormatError, NotFoundError, ValidationError
from shift_calendar.schedules.service import ScheduleService
from shift_calendar.shifts.clock import ShiftClock
from shift_calendar.storage.memory import InMemoryStorage
from shift_calendar.vacations.store import VacationStore


class TickingClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        self.now += 1
        return self.now


def make_service(today=date(2024, 1, 1)) -> ScheduleService:
    store = VacationStore(InMemoryStorage(), clock_ms=TickingClock())
    return ScheduleService(store, ShiftClock(), today_provider=lambda: today)


def test_month_grid_uses_today_provider():
    service = make_service(today=date(2024, 1, 1))
    cells = service.get_month_grid(2024, 1)
    assert len(cells) == 42
    assert [c.day for c in cells if c.is_today] == [date(2024, 1, 1)]


def test_explicit_today_overrides_provider():
    service = make_service(today=date(2024, 1, 1))
    cells = service.get_month_grid(2024, 1, today=date(2024, 1, 15))
    assert [c.day for c in cells if c.is_today] == [date(2024, 1, 15)]
    # anchor moved to Jan 16
    assert {c.day: c.role for c in cells}[date(2024, 1, 16)] == ShiftRole.ROLE_A


def test_month_view_bundles_title_and_weekdays():
    view = make_service().get_month_view(2024, 3)
    assert view.year == 2024 and view.month == 3
    assert view.title.endswith("2024")
    assert tuple(view.weekdays) == WEEKDAYS
    assert len(view.to_dict()["cells"]) == 42


def test_day_detail_without_vacation():
    service = make_service()
    detail = service.get_day_detail(date(2024, 1, 2))
    assert detail.role == ShiftRole.ROLE_A
    assert detail.vacation is None
    assert detail.display_label == "Daniel"
    assert not detail.is_today


def test_day_detail_reflects_most_recent_vacation():
    service = make_service()
    service.create_vacation("Trip", date(2024, 3, 10), date(2024, 3, 12), "")
    later = service.create_vacation("Wedding", date(2024, 3, 11), date(2024, 3, 11), "bring gift")

    detail = service.get_day_detail(date(2024, 3, 11))
    assert detail.vacation == later
    assert detail.display_label == "Wedding"
    assert detail.caption == "Vacation"
    assert detail.to_dict()["vacation"]["notes"] == "bring gift"


def test_grid_is_fresh_after_mutations():
    service = make_service()
    record = service.create_vacation("Trip", date(2024, 1, 3), date(2024, 1, 4))
    assert {c.day: c.display_label for c in service.get_month_grid(2024, 1)}[date(2024, 1, 3)] == "Trip"

    service.update_vacation(record.vacation_id, "Trip", date(2024, 1, 8), date(2024, 1, 9))
    labels = {c.day: c.display_label for c in service.get_month_grid(2024, 1)}
    assert labels[date(2024, 1, 3)] == "Daniel"
    assert labels[date(2024, 1, 8)] == "Trip"

    assert service.delete_vacation(record.vacation_id) is True
    assert all(c.vacation is None for c in service.get_month_grid(2024, 1))


def test_create_empty_label_leaves_store_unchanged():
    service = make_service()
    with pytest.raises(ValidationError) as exc:
        service.create_vacation("", date(2024, 1, 1), date(2024, 1, 2))
    assert exc.value.reason == ValidationReason.EMPTY_LABEL
    assert service.list_vacations() == []


def test_create_inverted_range_fails():
    with pytest.raises(ValidationError) as exc:
        make_service().create_vacation("X", date(2024, 5, 10), date(2024, 5, 5))
    assert exc.value.reason == ValidationReason.INVERTED_RANGE


def test_delete_unknown_is_noop():
    service = make_service()
    service.create_vacation("Trip", date(2024, 3, 10), date(2024, 3, 12))
    assert service.delete_vacation("nonexistent-id") is False
    assert len(service.list_vacations()) == 1


def test_get_vacation_not_found():
    with pytest.raises(NotFoundError):
        make_service().get_vacation("missing")


def test_navigate_prev_next_and_today():
    service = make_service(today=date(2024, 7, 4))
    assert service.navigate(2024, 1, -1) == (2023, 12)
    assert service.navigate(2023, 12, 1) == (2024, 1)
    assert service.navigate() == (2024, 7)


def test_navigate_rejects_invalid_month():
    with pytest.raises(FormatError):
        make_service().navigate(2024, 13, 0)
    with pytest.raises(FormatError):
        make_service().navigate(2024, 0, 1)


def test_day_detail_with_out_of_range_today():
    with pytest.raises(FormatError):
        make_service().get_day_detail(date(2024, 1, 1), today=date(9999, 12, 31))


def test_container_wires_role_names_from_settings():
    container = build_container(settings={"ROLE_A_NAME": "Ana", "ROLE_B_NAME": "Bo"}, storage=InMemoryStorage())
    cells = container.schedule_service.get_month_grid(2024, 1, today=date(2024, 1, 1))
    labels = {c.day: c.display_label for c in cells}
    assert labels[date(2024, 1, 2)] == "Ana"
    assert labels[date(2024, 1, 6)] == "Bo"


def test_container_uses_json_file_when_path_given(tmp_path):
    path = tmp_path / "calendar.json"
    first = build_container(settings={"STORAGE_PATH": str(path)})
    record = first.schedule_service.create_vacation("Trip", date(2024, 3, 10), date(2024, 3, 12))

    second = build_container(settings={"STORAGE_PATH": str(path)})
    assert second.schedule_service.get_vacation(record.vacation_id) == record
