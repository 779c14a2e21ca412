"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .common import ApiResponse, CamelModel, HealthCheckResponse, MessageResponse
from .notes import NoteCreate, NoteResponse
from .todos import TodoCreate, TodoResponse, TodoUpdate, TodoWithNotesResponse
from .users import UserResponse
from .validation import format_validation_errors

__all__ = [
    # Common
    "ApiResponse",
    "CamelModel",
    "MessageResponse",
    "HealthCheckResponse",
    "format_validation_errors",
    # Users
    "UserResponse",
    # Todos
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
    "TodoWithNotesResponse",
    # Notes
    "NoteCreate",
    "NoteResponse",
]
