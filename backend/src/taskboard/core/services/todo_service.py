"""Todo service implementation."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import InvalidReferenceError, NotFoundError, StorageError
from ..logging import get_logger
from ..models.todo import Todo
from ..repositories.note_repository import NoteRepository
from ..repositories.todo_repository import TodoRepository
from ..repositories.user_repository import UserRepository
from ..schemas.notes import NoteResponse
from ..schemas.todos import TodoCreate, TodoResponse, TodoUpdate, TodoWithNotesResponse
from .interfaces import ITodoService

logger = get_logger("services.todos")


class TodoService(ITodoService):
    """Todo service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.todo_repo = TodoRepository(session)
        # notes are attached to every todo we hand out
        self.note_repo = NoteRepository(session)
        # owners and mentions must resolve to real users
        self.user_repo = UserRepository(session)

    async def create_todo(self, request: TodoCreate) -> TodoResponse:
        """Create new todo for an existing user."""
        user = await self.user_repo.find_by_pid(request.user_pid)
        if not user:
            logger.error(f"User not found for pid: {request.user_pid}")
            raise InvalidReferenceError("User not found")

        todo_data = request.model_dump(exclude_unset=True)
        todo_data["user_pid"] = user.pid
        todo_data.setdefault("priority", request.priority)
        if request.mentions is not None:
            todo_data["mentions"] = await self._resolve_mentions(request.mentions)

        todo = await self.todo_repo.create_todo(todo_data)
        logger.info(f"Created todo {todo.pid} for user {user.pid}")
        return TodoResponse.model_validate(todo)

    async def get_todos(self, user_pid: Optional[str] = None) -> List[TodoWithNotesResponse]:
        """List todos with their notes, scoped to a user when given."""
        if user_pid:
            user = await self.user_repo.find_by_pid(user_pid)
            if not user:
                logger.error(f"User not found for pid: {user_pid}")
                raise NotFoundError("User not found")
            todos = await self.todo_repo.find_by_user_pid(user_pid)
        else:
            todos = await self.todo_repo.find_all()

        # snapshot every row first, a failed note lookup rolls the session back
        responses = [TodoWithNotesResponse.model_validate(todo) for todo in todos]
        for response in responses:
            await self._attach_notes(response)
        return responses

    async def get_todo_by_pid(self, pid: str) -> TodoWithNotesResponse:
        todo = await self._require_todo(pid)
        return await self._with_notes(todo)

    async def update_todo(self, pid: str, request: TodoUpdate) -> TodoWithNotesResponse:
        """Update only the fields present in the request."""
        await self._require_todo(pid)

        update_data = request.changes()
        if "mentions" in update_data:
            update_data["mentions"] = await self._resolve_mentions(update_data["mentions"])

        updated = await self.todo_repo.update_todo(pid, update_data)
        if not updated:
            # deleted between the lookup and the write
            logger.error(f"Todo not found for pid: {pid}")
            raise NotFoundError("Todo not found")

        return await self._with_notes(updated)

    async def delete_todo(self, pid: str) -> None:
        """Delete the todo and its notes in one transaction."""
        await self._require_todo(pid)

        deleted = await self.todo_repo.delete_by_pid(pid, commit=False)
        if not deleted:
            logger.error(f"Todo not found for pid: {pid}")
            raise NotFoundError("Todo not found")

        removed = await self.note_repo.delete_by_todo_pid(pid, commit=False)
        await self.todo_repo.commit()
        logger.info(f"Deleted todo {pid} and {removed} note(s)")

    async def toggle_todo_completion(self, pid: str) -> TodoWithNotesResponse:
        todo = await self.todo_repo.toggle_completion(pid)
        if not todo:
            logger.error(f"Todo not found for pid: {pid}")
            raise NotFoundError("Todo not found")
        return await self._with_notes(todo)

    async def _require_todo(self, pid: str) -> Todo:
        todo = await self.todo_repo.find_by_pid(pid)
        if not todo:
            logger.error(f"Todo not found for pid: {pid}")
            raise NotFoundError("Todo not found")
        return todo

    async def _resolve_mentions(self, mentions: List[str]) -> List[str]:
        """Map each mention to ``@<username>`` of an existing user."""
        resolved = []
        for mention in mentions:
            username = mention[1:] if mention.startswith("@") else mention
            user = await self.user_repo.find_by_username(username) if username else None
            if not user:
                logger.error(f"Invalid mentioned username: {mention}")
                raise InvalidReferenceError("Invalid mentioned usernames")
            resolved.append(user.mention)
        return resolved

    async def _with_notes(self, todo: Todo) -> TodoWithNotesResponse:
        response = TodoWithNotesResponse.model_validate(todo)
        return await self._attach_notes(response)

    async def _attach_notes(self, response: TodoWithNotesResponse) -> TodoWithNotesResponse:
        """Attach notes; a failed lookup yields an empty list for this todo only."""
        try:
            notes = await self.note_repo.find_by_todo_pid(response.pid)
        except StorageError as e:
            logger.error(f"Could not load notes for todo {response.pid}: {e}")
            notes = []
        response.notes = [NoteResponse.model_validate(note) for note in notes]
        return response
