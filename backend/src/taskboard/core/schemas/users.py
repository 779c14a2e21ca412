"""User schemas."""

from pydantic import ConfigDict, Field

from .common import CamelModel


class UserResponse(CamelModel):
    """Public user fields."""

    pid: str = Field(description="User public id")
    username: str = Field(description="Unique username")
    display_name: str = Field(description="Name shown in the UI")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "pid": "user_5b3f0c1e9a7d4c2b8e6f1a0d9c8b7a65",
                "username": "alex",
                "displayName": "Alex Johnson",
            }
        }
    )
