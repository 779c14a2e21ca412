"""
User model. Users come from seed data and are read-only over the API.
"""

from sqlalchemy import CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from ..ids import PublicIdPrefix, generate_public_id
from .base import BaseModel


class User(BaseModel):
    """A person who owns todos and writes notes."""

    __tablename__ = "users"

    pid: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
        default=lambda: generate_public_id(PublicIdPrefix.USER),
    )
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (
        CheckConstraint("length(username) <= 50", name="ck_users_username_len"),
        Index("idx_users_username", "username"),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"

    @property
    def mention(self) -> str:
        """Canonical ``@username`` form."""
        return f"@{self.username}"
