"""Repository layer for data access."""

from .base import BaseRepository
from .note_repository import NoteRepository
from .todo_repository import TodoRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "TodoRepository",
    "NoteRepository",
]
