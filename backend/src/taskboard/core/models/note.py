# Note model - comments attached to a todo
from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..ids import PublicIdPrefix, generate_public_id
from .base import BaseModel


class Note(BaseModel):
    """Note written by a user on a todo."""

    __tablename__ = "notes"

    pid: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        default=lambda: generate_public_id(PublicIdPrefix.NOTE),
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    todo_pid: Mapped[str] = mapped_column(
        String(64), ForeignKey("todos.pid", ondelete="CASCADE"), nullable=False
    )
    user_pid: Mapped[str] = mapped_column(String(64), ForeignKey("users.pid"), nullable=False)

    __table_args__ = (
        Index("idx_notes_todo_pid", "todo_pid"),
        Index("idx_notes_todo_created", "todo_pid", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Note(todo_pid={self.todo_pid}, user_pid={self.user_pid})>"
