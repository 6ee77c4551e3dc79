"""Schemas for user-related requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class UserCreateRequest(BaseModel):
    """Request payload for registering a user."""

    name: str = Field(..., min_length=2, examples=["Jane Doe"], description="User's display name")
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", examples=["jane@example.com"], description="Unique email address")


class UserResponse(BaseModel):
    """Registered user returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
