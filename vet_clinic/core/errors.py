"""Error types raised by the repository layer.

Purpose:
- Give callers one small hierarchy to catch and map to user-facing statuses.
- Keep the operation name and the underlying driver exception for diagnosis.

Usage:
- Catch ``RepositoryError`` for any store failure.
- ``NotFoundError`` when a lookup, update or delete target is absent.
- ``DuplicateEntryError`` when a unique constraint rejects a write.
- ``InvalidDateError`` when an attention date cannot be parsed.
- ``StorageError`` for any other fault; inspect ``operation`` and ``cause``.
"""

from __future__ import annotations

from typing import Any, Optional


class RepositoryError(Exception):
    """Base error for all repository failures."""


class NotFoundError(RepositoryError):
    """Raised when the requested entity does not exist.

    Args:
        entity: Entity name (e.g. ``"owner"``).
        entity_id: The identifier that was looked up.
    """

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateEntryError(RepositoryError):
    """Raised when a write violates a uniqueness constraint."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Duplicate entry in {operation}")
        self.operation = operation
        self.cause = cause


class InvalidDateError(RepositoryError):
    """Raised when a date value cannot be normalized."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid date: {value!r}")
        self.value = value


class StorageError(RepositoryError):
    """Raised for any other fault of the underlying store.

    Args:
        operation: Operation tag such as ``"create owner"``.
        cause: The original exception raised by the driver or ORM.
    """

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        message = f"Failed to {operation}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.operation = operation
        self.cause = cause
