from __future__ import annotations

from datetime import date, timedelta

import pytest

from shift_calendar.core.enums import ShiftRole
from shift_calendar.shifts.clock import ShiftClock, reference_anchor, shift_role_for
from shift_calendar.shifts.model import RoleProfile

TODAY = date(2024, 1, 1)
ANCHOR = date(2024, 1, 2)


def test_anchor_is_day_after_today():
    assert reference_anchor(TODAY) == ANCHOR
    assert reference_anchor(date(2023, 12, 31)) == date(2024, 1, 1)


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2024, 1, 2), ShiftRole.ROLE_A),
        (date(2024, 1, 5), ShiftRole.ROLE_A),
        (date(2024, 1, 6), ShiftRole.ROLE_B),
        (date(2024, 1, 9), ShiftRole.ROLE_B),
        (date(2024, 1, 10), ShiftRole.ROLE_A),
    ],
)
def test_four_on_four_off_from_anchor(day, expected):
    assert shift_role_for(day, ANCHOR) == expected


def test_days_before_anchor_use_mathematical_modulo():
    # offsets -1..-4 fall on cycle positions 7..4 (off), -5 on position 3 (on)
    assert shift_role_for(date(2024, 1, 1), ANCHOR) == ShiftRole.ROLE_B
    assert shift_role_for(date(2023, 12, 29), ANCHOR) == ShiftRole.ROLE_B
    assert shift_role_for(date(2023, 12, 28), ANCHOR) == ShiftRole.ROLE_A


def test_role_is_periodic_with_period_eight():
    day = date(2023, 6, 1)
    for _ in range(120):
        assert shift_role_for(day, ANCHOR) == shift_role_for(day + timedelta(days=8), ANCHOR)
        day += timedelta(days=1)


def test_each_cycle_has_four_on_days():
    days = [ANCHOR + timedelta(days=i) for i in range(-40, 40)]
    roles = [shift_role_for(d, ANCHOR) for d in days]
    for start in range(0, len(roles) - 8):
        window = roles[start:start + 8]
        assert window.count(ShiftRole.ROLE_A) == 4


def test_leap_day_is_just_another_offset():
    anchor = reference_anchor(date(2024, 2, 27))
    assert anchor == date(2024, 2, 28)
    assert shift_role_for(date(2024, 2, 29), anchor) == ShiftRole.ROLE_A
    assert shift_role_for(date(2024, 3, 2), anchor) == ShiftRole.ROLE_A
    assert shift_role_for(date(2024, 3, 3), anchor) == ShiftRole.ROLE_B


def test_clock_profiles_default_and_override():
    clock = ShiftClock()
    assert clock.profile(ShiftRole.ROLE_A).name == "Daniel"
    assert clock.profile(ShiftRole.ROLE_B).hours_label == "Rest"

    custom = ShiftClock(role_a=RoleProfile(ShiftRole.ROLE_A, "Ana", "Night"))
    assert custom.profile(ShiftRole.ROLE_A).name == "Ana"
    assert custom.profile(ShiftRole.ROLE_B).name == "Michael"
    assert custom.role_for(date(2024, 1, 2), custom.anchor_for(TODAY)) == ShiftRole.ROLE_A
