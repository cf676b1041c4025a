from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimestamp(ValidationError):
    """Raised when an event timestamp is missing or cannot be parsed."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid timestamp: {value!r}")
        self.value = value
