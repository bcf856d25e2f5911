from __future__ import annotations

from typing import Iterable, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, fields: Iterable[str] = ()):
        super().__init__(message)
        self.fields = tuple(fields)


class NotFoundError(DomainError):
    """Raised when the requested record does not exist."""


class StorageError(DomainError):
    """Raised when the underlying storage is unavailable, fails or times out.

    `details` carries the driver message; it is only shown to clients when
    error details are exposed (development).
    """

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.details = details


class SchemaNotInitializedError(StorageError):
    """Raised when the attendance table has not been created yet."""
