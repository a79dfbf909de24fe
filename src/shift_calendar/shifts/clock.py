from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, add_days, days_between
from ..core.constants import (
    CYCLE_LENGTH_DAYS,
    DEFAULT_ROLE_A_HOURS,
    DEFAULT_ROLE_A_NAME,
    DEFAULT_ROLE_B_HOURS,
    DEFAULT_ROLE_B_NAME,
    ON_DAYS_PER_CYCLE,
)
from ..core.enums import ShiftRole
from .model import RoleProfile


def reference_anchor(today: DateLike) -> date:
    """Day-offset zero of the cycle: the day after ``today``."""
    return add_days(today, 1)


def shift_role_for(target: DateLike, anchor: DateLike) -> ShiftRole:
    offset = days_between(anchor, target)
    # Normalized into [0, 8) for negative offsets too.
    cycle_index = ((offset % CYCLE_LENGTH_DAYS) + CYCLE_LENGTH_DAYS) % CYCLE_LENGTH_DAYS
    return ShiftRole.ROLE_A if cycle_index < ON_DAYS_PER_CYCLE else ShiftRole.ROLE_B


class ShiftClock:
    """Resolves which person is on shift and how to show them."""

    def __init__(self, role_a: Optional[RoleProfile] = None, role_b: Optional[RoleProfile] = None):
        self._profiles = {
            ShiftRole.ROLE_A: role_a or RoleProfile(ShiftRole.ROLE_A, DEFAULT_ROLE_A_NAME, DEFAULT_ROLE_A_HOURS),
            ShiftRole.ROLE_B: role_b or RoleProfile(ShiftRole.ROLE_B, DEFAULT_ROLE_B_NAME, DEFAULT_ROLE_B_HOURS),
        }

    def anchor_for(self, today: DateLike) -> date:
        return reference_anchor(today)

    def role_for(self, target: DateLike, anchor: DateLike) -> ShiftRole:
        return shift_role_for(target, anchor)

    def profile(self, role: ShiftRole) -> RoleProfile:
        return self._profiles[role]
