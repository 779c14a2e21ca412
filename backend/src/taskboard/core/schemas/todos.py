"""
Todo schemas.

These schemas define the API contracts for todo CRUD operations. Field
names are camelCase on the wire (``userPid``, ``createdAt``).
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from .common import CamelModel
from .notes import NoteResponse

PriorityLiteral = Literal["high", "medium", "low"]


class TodoCreate(CamelModel):
    """Todo creation request schema."""

    title: str = Field(min_length=1, description="Todo title")
    description: Optional[str] = Field(default=None, description="Optional details, may be empty")
    priority: PriorityLiteral = Field(default="medium", description="high, medium or low")
    user_pid: str = Field(min_length=1, description="Owner public id")
    tags: Optional[List[str]] = Field(default=None, description="Free-form tags")
    mentions: Optional[List[str]] = Field(default=None, description="Usernames, with or without '@'")

    @field_validator("description", "tags", "mentions")
    @classmethod
    def reject_null(cls, v):
        """Optional fields may be omitted but not sent as null."""
        if v is None:
            raise ValueError("must not be null")
        return v

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "Prepare sprint demo",
                "description": "Slides and a short walkthrough",
                "priority": "high",
                "userPid": "user_5b3f0c1e9a7d4c2b8e6f1a0d9c8b7a65",
                "tags": ["work", "project"],
                "mentions": ["@maria"],
            }
        },
    )


class TodoUpdate(CamelModel):
    """Todo update request schema. Any subset of the mutable fields."""

    title: Optional[str] = Field(default=None, min_length=1, description="Todo title")
    description: Optional[str] = Field(default=None, description="Details, may be empty")
    priority: Optional[PriorityLiteral] = Field(default=None, description="high, medium or low")
    completed: Optional[bool] = Field(default=None, description="Completion flag")
    tags: Optional[List[str]] = Field(default=None, description="Free-form tags")
    mentions: Optional[List[str]] = Field(default=None, description="Usernames, with or without '@'")

    @field_validator("title", "priority", "completed", "tags", "mentions")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

    def changes(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "priority": "low",
                "completed": True,
            }
        },
    )


class TodoResponse(CamelModel):
    """Todo response schema."""

    pid: str = Field(description="Todo public id")
    title: str
    description: Optional[str] = None
    priority: PriorityLiteral
    user_pid: str = Field(description="Owner public id")
    completed: bool
    tags: List[str] = Field(default_factory=list)
    mentions: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("tags", "mentions", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v


class TodoWithNotesResponse(TodoResponse):
    """Todo together with its notes."""

    notes: List[NoteResponse] = Field(default_factory=list)
