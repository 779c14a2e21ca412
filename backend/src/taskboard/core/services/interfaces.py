"""
Service interfaces for Taskboard.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteResponse
from ..schemas.todos import TodoCreate, TodoResponse, TodoUpdate, TodoWithNotesResponse
from ..schemas.users import UserResponse


class IUserService(ABC):
    """Read access to seeded users."""

    @abstractmethod
    async def get_all_users(self) -> List[UserResponse]:
        """List every user."""
        pass

    @abstractmethod
    async def get_user_by_pid(self, pid: str) -> UserResponse:
        """Get user by public id."""
        pass


class ITodoService(ABC):
    """Todo service for CRUD operations."""

    @abstractmethod
    async def create_todo(self, request: TodoCreate) -> TodoResponse:
        """Create new todo."""
        pass

    @abstractmethod
    async def get_todos(self, user_pid: Optional[str] = None) -> List[TodoWithNotesResponse]:
        """List todos, optionally for one user."""
        pass

    @abstractmethod
    async def get_todo_by_pid(self, pid: str) -> TodoWithNotesResponse:
        """Get one todo with its notes."""
        pass

    @abstractmethod
    async def update_todo(self, pid: str, request: TodoUpdate) -> TodoWithNotesResponse:
        """Partially update a todo."""
        pass

    @abstractmethod
    async def delete_todo(self, pid: str) -> None:
        """Delete a todo and its notes."""
        pass

    @abstractmethod
    async def toggle_todo_completion(self, pid: str) -> TodoWithNotesResponse:
        """Flip the completed flag."""
        pass


class INoteService(ABC):
    """Note service."""

    @abstractmethod
    async def create_note(self, request: NoteCreate) -> NoteResponse:
        """Attach a note to a todo."""
        pass

    @abstractmethod
    async def get_notes_by_todo_pid(self, todo_pid: str) -> List[NoteResponse]:
        """Notes of one todo."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
