"""
Promptopia Backend — Pydantic Response Schemas
================================================

What:  Pydantic models defining the API contract with the frontend.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI serializes route return values through these models
       (by alias, so identifiers go out as "_id" like the frontend expects).

Design Decision:
    Schemas are separate from SQLAlchemy models because the API shape differs
    from the table shape: a prompt's `creator` is the populated user object,
    while the table only stores `creator_id`.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class CreatorResponse(BaseModel):
    """
    What:  A user record embedded in each prompt (the populated creator).
    Why:   The frontend renders the avatar and username on every prompt card
           without a second request.
    """
    id: str = Field(alias="_id", description="User identifier")
    email: str = Field(description="User email address")
    username: str = Field(description="Public handle")
    image: Optional[str] = Field(default=None, description="Avatar URL")

    model_config = ConfigDict(populate_by_name=True)


class PromptResponse(BaseModel):
    """
    What:  A prompt with its creator populated.
    Who:   Returned (as a list) by GET /api/users/{id}/posts.

    creator is null when the stored creator id no longer resolves to a user.
    """
    id: str = Field(alias="_id", description="Prompt identifier")
    creator: Optional[CreatorResponse] = Field(
        default=None,
        description="The prompt's creator, or null if the user no longer exists",
    )
    prompt: str = Field(description="Prompt text")
    tag: str = Field(description="Topic tag")
    created_at: datetime = Field(description="When the prompt was created (UTC ISO 8601)")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite drops the offset on read; stored timestamps are always UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models — Consistent error format across endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized JSON error format.

    Example:
        {
            "error": "validation_error",
            "message": "User id must be 1-64 characters ...",
            "details": {"field": "id"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
