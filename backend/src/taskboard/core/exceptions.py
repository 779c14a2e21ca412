"""
Domain exceptions for the Taskboard core.

Services raise these; the API layer maps them onto HTTP responses.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class TaskboardError(Exception):
    """Base class for exceptions carrying an HTTP status code."""

    status_code: int = 500

    def __init__(self, detail: Optional[str] = None, messages: Optional[Iterable[str]] = None) -> None:
        super().__init__(detail or "")
        self.detail = detail
        self.messages: List[str] = list(messages) if messages else ([detail] if detail else [])


class RequestValidationFailed(TaskboardError):
    """Raised when a request body fails schema validation."""

    status_code = 400


class InvalidReferenceError(TaskboardError):
    """Raised when a write references an entity that does not exist."""

    status_code = 400


class NotFoundError(TaskboardError):
    """Raised when a requested resource is not found."""

    status_code = 404


class StorageError(TaskboardError):
    """Raised when the underlying database fails."""

    status_code = 500
