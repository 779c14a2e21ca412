"""Note repository for database operations."""

from typing import List

from sqlalchemy import delete, select

from ..models.note import Note
from .base import BaseRepository


class NoteRepository(BaseRepository):
    """Repository for note database operations."""

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        async with self._storage("create note"):
            note = Note(**note_data)
            self.session.add(note)
            await self.session.commit()
            await self.session.refresh(note)
            return note

    async def find_by_todo_pid(self, todo_pid: str) -> List[Note]:
        """Notes of one todo in creation order."""
        async with self._storage(f"list notes for todo {todo_pid}"):
            stmt = select(Note).where(Note.todo_pid == todo_pid).order_by(Note.created_at)
            result = await self.session.execute(stmt)
            return list(result.scalars())

    async def delete_by_todo_pid(self, todo_pid: str, commit: bool = True) -> int:
        """Delete every note of a todo and return how many went."""
        async with self._storage(f"delete notes for todo {todo_pid}"):
            result = await self.session.execute(delete(Note).where(Note.todo_pid == todo_pid))
            if commit:
                await self.session.commit()
            else:
                await self.session.flush()
            return result.rowcount or 0
