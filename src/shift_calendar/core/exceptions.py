from __future__ import annotations

from typing import Optional

from .enums import ValidationReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when vacation input is invalid. Nothing has been mutated."""

    def __init__(self, reason: ValidationReason, message: Optional[str] = None):
        super().__init__(message or reason.value)
        self.reason = reason


class FormatError(DomainError):
    """Raised when a date string is not a valid YYYY-MM-DD date."""


class NotFoundError(DomainError):
    """Raised when a vacation id does not exist."""


class PersistenceError(DomainError):
    """Raised when the key-value storage cannot be read or written."""
