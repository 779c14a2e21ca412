"""
Shared response schemas - envelope, camelCase base, health
"""

from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema using camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope: ``{success, data, errors}``."""

    success: bool = Field(description="Whether the operation succeeded")
    data: Optional[T] = Field(default=None, description="Payload on success")
    errors: Optional[List[str]] = Field(default=None, description="Human-readable error messages")

    @classmethod
    def ok(cls, data: Any) -> "ApiResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, errors: List[str]) -> "ApiResponse":
        return cls(success=False, errors=errors)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "errors": ["Title is required"],
            }
        }
    )


class MessageResponse(BaseModel):
    """Plain message body used by delete."""

    message: str = Field(description="Result message")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "database": {
                        "status": "healthy",
                        "response_time_ms": 15
                    }
                }
            }
        }
    )
