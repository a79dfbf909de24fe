from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ShiftRole


@dataclass(frozen=True)
class RoleProfile:
    """Display profile for one side of the rotation."""

    role: ShiftRole
    name: str
    hours_label: str
