from __future__ import annotations

import enum
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorKind(enum.StrEnum):
    """Failure categories returned by lifecycle operations."""

    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    STORAGE = "storage"


class OperationResult(BaseModel, Generic[T]):
    """Outcome of a lifecycle operation. Expected failures are returned, not raised."""

    success: bool
    message: str
    error: ErrorKind | None = None
    data: T | None = None

    @classmethod
    def ok(cls, message: str, data: T | None = None) -> OperationResult[T]:
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> OperationResult[T]:
        return cls(success=False, message=message, error=error)
