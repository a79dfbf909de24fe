from __future__ import annotations

from enum import Enum


class ShiftRole(str, Enum):
    """Which of the two people is on shift for a day.

    ROLE_A is the "on" half of the cycle, ROLE_B the "off" half.
    """

    ROLE_A = "on"
    ROLE_B = "off"


class ValidationReason(str, Enum):
    """Structured reason attached to a rejected vacation request."""

    EMPTY_LABEL = "EMPTY_LABEL"
    MISSING_DATE = "MISSING_DATE"
    INVERTED_RANGE = "INVERTED_RANGE"
