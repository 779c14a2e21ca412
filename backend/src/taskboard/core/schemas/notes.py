"""Note schemas."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .common import CamelModel


class NoteCreate(CamelModel):
    """Note creation request schema."""

    content: str = Field(min_length=1, description="Note text")
    todo_pid: str = Field(min_length=1, description="Todo the note belongs to")
    user_pid: str = Field(min_length=1, description="Author public id")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "content": "Waiting on design review",
                "todoPid": "todo_0c9d8e7f6a5b4c3d2e1f0a9b8c7d6e5f",
                "userPid": "user_5b3f0c1e9a7d4c2b8e6f1a0d9c8b7a65",
            }
        },
    )


class NoteResponse(CamelModel):
    """Note response schema."""

    pid: str = Field(description="Note public id")
    content: str
    todo_pid: str
    user_pid: str
    created_at: Optional[datetime] = None
