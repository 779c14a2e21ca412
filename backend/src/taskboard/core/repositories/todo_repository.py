"""Todo repository for database operations."""

import logging
from typing import List, Optional

from sqlalchemy import delete, select

from ..models.todo import Todo
from .base import BaseRepository

logger = logging.getLogger(__name__)


class TodoRepository(BaseRepository):
    """Repository for todo database operations."""

    async def create_todo(self, todo_data: dict) -> Todo:
        """Create new todo."""
        async with self._storage("create todo"):
            todo = Todo(**todo_data)
            self.session.add(todo)
            await self.session.commit()
            await self.session.refresh(todo)
            return todo

    async def find_by_pid(self, pid: str) -> Optional[Todo]:
        """Get todo by public id."""
        async with self._storage(f"load todo {pid}"):
            stmt = select(Todo).where(Todo.pid == pid)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def find_by_user_pid(self, user_pid: str) -> List[Todo]:
        """Todos owned by one user, oldest first."""
        async with self._storage(f"list todos for user {user_pid}"):
            stmt = select(Todo).where(Todo.user_pid == user_pid).order_by(Todo.created_at)
            result = await self.session.execute(stmt)
            return list(result.scalars())

    async def find_all(self) -> List[Todo]:
        """Every todo, oldest first."""
        async with self._storage("list todos"):
            stmt = select(Todo).order_by(Todo.created_at)
            result = await self.session.execute(stmt)
            return list(result.scalars())

    async def update_todo(self, pid: str, update_data: dict) -> Optional[Todo]:
        """Apply the given fields and return the refreshed todo."""
        async with self._storage(f"update todo {pid}"):
            todo = await self._get(pid)
            if not todo:
                return None

            for key, value in update_data.items():
                setattr(todo, key, value)

            await self.session.commit()
            await self.session.refresh(todo)
            return todo

    async def toggle_completion(self, pid: str) -> Optional[Todo]:
        """Flip ``completed``. Read-modify-write, last write wins."""
        async with self._storage(f"toggle todo {pid}"):
            todo = await self._get(pid)
            if not todo:
                return None

            todo.toggle()
            await self.session.commit()
            await self.session.refresh(todo)
            return todo

    async def delete_by_pid(self, pid: str, commit: bool = True) -> bool:
        """Delete a todo. With ``commit=False`` the delete is only flushed."""
        async with self._storage(f"delete todo {pid}"):
            result = await self.session.execute(delete(Todo).where(Todo.pid == pid))
            deleted = (result.rowcount or 0) > 0
            if commit:
                await self.session.commit()
            else:
                await self.session.flush()
            logger.debug(f"Delete todo {pid}: {'removed' if deleted else 'nothing to remove'}")
            return deleted

    async def _get(self, pid: str) -> Optional[Todo]:
        stmt = select(Todo).where(Todo.pid == pid)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
