"""
Async HTTP client for the Taskboard API.

Every fetcher unwraps the ``{success, data, errors}`` envelope into typed
models. Reads go through a ``QueryCache``; writes invalidate the queries
they make stale.
"""

import logging
from typing import Any, List, Optional, Union

import httpx
from pydantic import BaseModel, TypeAdapter

from ..config import get_settings
from ..core.schemas.notes import NoteCreate, NoteResponse
from ..core.schemas.todos import TodoCreate, TodoResponse, TodoUpdate, TodoWithNotesResponse
from ..core.schemas.users import UserResponse
from .cache import QueryCache

logger = logging.getLogger(__name__)

_users = TypeAdapter(List[UserResponse])
_todos = TypeAdapter(List[TodoWithNotesResponse])
_notes = TypeAdapter(List[NoteResponse])


class ApiClientError(Exception):
    """Raised when a request fails or the server reports ``success: false``."""

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


def _payload(data: Union[BaseModel, dict]) -> dict:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_unset=True)
    return data


class TaskboardClient:
    """Typed fetchers over the REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        cache: Optional[QueryCache] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url or settings.client_base_url,
            timeout=timeout or settings.client_timeout_seconds,
        )
        self.cache = cache if cache is not None else QueryCache()

    async def __aenter__(self) -> "TaskboardClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _request(self, method: str, url: str, action: str, fallback: str, **kwargs) -> Any:
        """Send a request and return the envelope's ``data``."""
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise ApiClientError(f"Error {action}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not isinstance(body, dict) or not body.get("success"):
            errors = body.get("errors") if isinstance(body, dict) else None
            errors = errors or [fallback]
            logger.warning(f"{method} {url} failed with {response.status_code}: {errors}")
            raise ApiClientError(
                f"Error {action}: {', '.join(errors)}",
                status_code=response.status_code,
                errors=errors,
            )
        return body.get("data")

    # -- users -------------------------------------------------------------

    async def fetch_users(self) -> List[UserResponse]:
        async def load():
            data = await self._request("GET", "/users", "fetching users", "Failed to fetch users")
            return _users.validate_python(data)

        return await self.cache.fetch(("users",), load)

    async def fetch_user_by_pid(self, pid: str) -> UserResponse:
        async def load():
            data = await self._request("GET", f"/users/{pid}", "fetching user", "Failed to fetch user")
            return UserResponse.model_validate(data)

        return await self.cache.fetch(("user", pid), load)

    # -- todos -------------------------------------------------------------

    async def fetch_todos(self, user_pid: Optional[str] = None) -> List[TodoWithNotesResponse]:
        """Todos with notes, optionally for one user."""
        params = {"userPid": user_pid} if user_pid else None

        async def load():
            data = await self._request(
                "GET", "/todos", "fetching todos", "Failed to fetch todos", params=params
            )
            return _todos.validate_python(data)

        return await self.cache.fetch(("todos", user_pid), load)

    async def fetch_todo_by_pid(self, pid: str) -> TodoWithNotesResponse:
        async def load():
            data = await self._request("GET", f"/todos/{pid}", "fetching todo", "Failed to fetch todo")
            return TodoWithNotesResponse.model_validate(data)

        return await self.cache.fetch(("todo", pid), load)

    async def create_todo(self, data: Union[TodoCreate, dict]) -> TodoResponse:
        created = await self._request(
            "POST", "/todos", "creating todo", "Failed to create todo", json=_payload(data)
        )
        self.cache.invalidate(("todos",))
        return TodoResponse.model_validate(created)

    async def update_todo(self, pid: str, data: Union[TodoUpdate, dict]) -> TodoWithNotesResponse:
        updated = await self._request(
            "PATCH", f"/todos/{pid}", "updating todo", "Failed to update todo", json=_payload(data)
        )
        todo = TodoWithNotesResponse.model_validate(updated)
        self.cache.invalidate(("todos",))
        self.cache.invalidate(("todo", todo.pid))
        return todo

    async def delete_todo(self, pid: str) -> None:
        """Delete a todo. The server answers with a plain ``{message}`` body."""
        try:
            response = await self._http.delete(f"/todos/{pid}")
        except httpx.HTTPError as e:
            raise ApiClientError(f"Error deleting todo: {e}") from e

        if response.status_code not in (200, 204):
            try:
                body = response.json()
            except ValueError:
                body = {}
            errors = body.get("errors") or [body.get("message") or "Failed to delete todo"]
            raise ApiClientError(
                f"Error deleting todo: {', '.join(errors)}",
                status_code=response.status_code,
                errors=errors,
            )

        self.cache.invalidate(("todos",))
        self.cache.invalidate(("todo", pid))
        self.cache.invalidate(("notes", pid))

    async def toggle_todo_completion(self, pid: str) -> TodoWithNotesResponse:
        toggled = await self._request(
            "PATCH",
            f"/todos/{pid}/toggle",
            "toggling todo completion",
            "Failed to toggle todo completion",
        )
        todo = TodoWithNotesResponse.model_validate(toggled)
        self.cache.invalidate(("todos",))
        self.cache.invalidate(("todo", todo.pid))
        return todo

    # -- notes -------------------------------------------------------------

    async def create_note(self, data: Union[NoteCreate, dict]) -> NoteResponse:
        created = await self._request(
            "POST", "/notes", "creating note", "Failed to create note", json=_payload(data)
        )
        note = NoteResponse.model_validate(created)
        self.cache.invalidate(("notes", note.todo_pid))
        self.cache.invalidate(("todo", note.todo_pid))
        self.cache.invalidate(("todos",))
        return note

    async def fetch_notes_by_todo_pid(self, todo_pid: str) -> List[NoteResponse]:
        async def load():
            data = await self._request(
                "GET", f"/todos/{todo_pid}/notes", "fetching notes", "Failed to fetch notes"
            )
            return _notes.validate_python(data)

        return await self.cache.fetch(("notes", todo_pid), load)
