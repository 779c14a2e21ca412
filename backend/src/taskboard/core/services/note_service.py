"""Note service implementation."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError
from ..logging import get_logger
from ..repositories.note_repository import NoteRepository
from ..repositories.todo_repository import TodoRepository
from ..repositories.user_repository import UserRepository
from ..schemas.notes import NoteCreate, NoteResponse
from .interfaces import INoteService

logger = get_logger("services.notes")


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.todo_repo = TodoRepository(session)
        self.user_repo = UserRepository(session)

    async def create_note(self, request: NoteCreate) -> NoteResponse:
        """Create a note after checking the todo and the author exist."""
        todo = await self.todo_repo.find_by_pid(request.todo_pid)
        if not todo:
            logger.error(f"Todo not found for pid: {request.todo_pid}")
            raise NotFoundError("Todo not found")

        user = await self.user_repo.find_by_pid(request.user_pid)
        if not user:
            logger.error(f"User not found for pid: {request.user_pid}")
            raise NotFoundError("User not found")

        note = await self.note_repo.create_note(
            {
                "content": request.content,
                "todo_pid": todo.pid,
                "user_pid": user.pid,
            }
        )
        return NoteResponse.model_validate(note)

    async def get_notes_by_todo_pid(self, todo_pid: str) -> List[NoteResponse]:
        todo = await self.todo_repo.find_by_pid(todo_pid)
        if not todo:
            logger.error(f"Todo not found for pid: {todo_pid}")
            raise NotFoundError("Todo not found")

        notes = await self.note_repo.find_by_todo_pid(todo_pid)
        return [NoteResponse.model_validate(note) for note in notes]
