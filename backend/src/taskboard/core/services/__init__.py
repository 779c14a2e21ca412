"""
Service layer interfaces and implementations.
"""

from .interfaces import (
    IHealthService,
    INoteService,
    ITodoService,
    IUserService,
)

from .health_service import HealthService
from .note_service import NoteService
from .todo_service import TodoService
from .user_service import UserService

__all__ = [
    # Interfaces
    "IUserService",
    "ITodoService",
    "INoteService",
    "IHealthService",

    # Implementations
    "UserService",
    "TodoService",
    "NoteService",
    "HealthService",
]
