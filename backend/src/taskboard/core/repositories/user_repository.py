"""User repository for database operations."""

from typing import List, Optional

from sqlalchemy import func, select

from ..models.user import User
from .base import BaseRepository


class UserRepository(BaseRepository):
    """Repository for user database operations."""

    async def create_user(self, user_data: dict) -> User:
        """Create new user."""
        async with self._storage("create user"):
            user = User(**user_data)
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
            return user

    async def find_by_pid(self, pid: str) -> Optional[User]:
        """Get user by public id."""
        async with self._storage(f"load user {pid}"):
            stmt = select(User).where(User.pid == pid)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def find_by_username(self, username: str) -> Optional[User]:
        """Get user by username, exact match first, then case-insensitive."""
        async with self._storage(f"load user {username}"):
            stmt = select(User).where(User.username == username)
            result = await self.session.execute(stmt)
            user = result.scalar_one_or_none()
            if user is not None:
                return user

            stmt = (
                select(User)
                .where(func.lower(User.username) == username.lower())
                .order_by(User.username)
            )
            result = await self.session.execute(stmt)
            return result.scalars().first()

    async def find_all(self) -> List[User]:
        """List every user ordered by username."""
        async with self._storage("list users"):
            stmt = select(User).order_by(User.username)
            result = await self.session.execute(stmt)
            return list(result.scalars())

    async def is_username_taken(self, username: str) -> bool:
        """Check if username exists (exact match)."""
        async with self._storage(f"check username {username}"):
            stmt = select(func.count(User.id)).where(User.username == username)
            result = await self.session.execute(stmt)
            return (result.scalar() or 0) > 0
