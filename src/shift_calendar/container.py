from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import (
    DEFAULT_ROLE_A_HOURS,
    DEFAULT_ROLE_A_NAME,
    DEFAULT_ROLE_B_HOURS,
    DEFAULT_ROLE_B_NAME,
    DEFAULT_STORAGE_KEY,
)
from .core.enums import ShiftRole
from .schedules.service import ScheduleService
from .shifts.clock import ShiftClock
from .shifts.model import RoleProfile
from .storage.base import KeyValueStorage
from .storage.json_file import JsonFileStorage
from .storage.memory import InMemoryStorage
from .vacations.store import VacationStore


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    vacation_store: VacationStore
    shift_clock: ShiftClock
    schedule_service: ScheduleService


def build_container(*, settings: Optional[dict] = None, storage: Optional[KeyValueStorage] = None) -> Container:
    """Wire the engine from a settings mapping (see the ``config`` package).

    An explicit ``storage`` wins over ``STORAGE_PATH``; with neither, vacations
    live in memory only.
    """

    settings = settings or {}

    if storage is None:
        storage_path = settings.get("STORAGE_PATH")
        storage = JsonFileStorage(storage_path) if storage_path else InMemoryStorage()

    vacation_store = VacationStore(storage, key=str(settings.get("STORAGE_KEY") or DEFAULT_STORAGE_KEY))
    shift_clock = ShiftClock(
        RoleProfile(
            ShiftRole.ROLE_A,
            str(settings.get("ROLE_A_NAME") or DEFAULT_ROLE_A_NAME),
            str(settings.get("ROLE_A_HOURS") or DEFAULT_ROLE_A_HOURS),
        ),
        RoleProfile(
            ShiftRole.ROLE_B,
            str(settings.get("ROLE_B_NAME") or DEFAULT_ROLE_B_NAME),
            str(settings.get("ROLE_B_HOURS") or DEFAULT_ROLE_B_HOURS),
        ),
    )
    schedule_service = ScheduleService(vacation_store, shift_clock)

    return Container(
        storage=storage,
        vacation_store=vacation_store,
        shift_clock=shift_clock,
        schedule_service=schedule_service,
    )
