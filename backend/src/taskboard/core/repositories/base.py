"""Shared repository plumbing."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import StorageError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Holds the session and turns driver failures into ``StorageError``."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _storage(self, action: str) -> AsyncIterator[None]:
        """Log and roll back on any SQLAlchemy error, then raise ``StorageError``."""
        try:
            yield
        except SQLAlchemyError as e:
            reason = getattr(e, "orig", None) or e
            logger.error(f"Failed to {action}: {reason}")
            await self.session.rollback()
            raise StorageError(f"Failed to {action}: {reason}") from e

    async def commit(self) -> None:
        """Commit pending work (used when a service batches several writes)."""
        async with self._storage("commit transaction"):
            await self.session.commit()
