from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import ValidationReason
from ..core.exceptions import ValidationError


def require_label(value: Optional[str]) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(ValidationReason.EMPTY_LABEL, "Label must not be empty")
    return value.strip()


def require_date(value: Optional[date], field_name: str) -> date:
    if value is None:
        raise ValidationError(ValidationReason.MISSING_DATE, f"{field_name} is required")
    return value


def require_ordered_range(start: date, end: date) -> None:
    if start > end:
        raise ValidationError(ValidationReason.INVERTED_RANGE, "End date must be on or after start date")
