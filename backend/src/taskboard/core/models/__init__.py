"""
Database models for Taskboard.

This package contains SQLAlchemy ORM models that define the database schema.
All models are designed for async operations.

Models included:
    - User: seeded accounts that own todos and write notes
    - Todo: task items with priority, tags and mentions
    - Note: comments attached to a todo
"""

from .base import BaseModel
from .note import Note
from .todo import Priority, Todo
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Todo",
    "Priority",
    "Note",
]
