# Todo model - the main unit of work
from enum import Enum
from typing import List, Optional

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..ids import PublicIdPrefix, generate_public_id
from .base import BaseModel
from .types import StringListType


class Priority(str, Enum):
    """Todo priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Todo(BaseModel):
    """A to-do item owned by exactly one user."""

    __tablename__ = "todos"

    pid: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        default=lambda: generate_public_id(PublicIdPrefix.TODO),
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    priority: Mapped[str] = mapped_column(
        String(10), default=Priority.MEDIUM.value, nullable=False
    )
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    tags: Mapped[Optional[List[str]]] = mapped_column(StringListType, nullable=True)
    mentions: Mapped[Optional[List[str]]] = mapped_column(StringListType, nullable=True)  # "@username"

    # owner reference by public id
    user_pid: Mapped[str] = mapped_column(String(64), ForeignKey("users.pid"), nullable=False)

    __table_args__ = (
        CheckConstraint(
            "priority IN ('high', 'medium', 'low')", name="ck_todos_priority"
        ),
        Index("idx_todos_user_pid", "user_pid"),
        Index("idx_todos_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Todo(title='{truncated}', user_pid={self.user_pid})>"

    def toggle(self) -> bool:
        """Flip completion and return the new value."""
        self.completed = not self.completed
        return self.completed
