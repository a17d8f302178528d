"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfilePayload(BaseModel):
    """Schema for creating or updating a Profile.

    Missing fields default to empty strings so the service layer reports
    them as an invalid payload rather than a schema error.
    """

    username: str = Field("", description="Display handle, must not be empty")
    bio: str = Field("", description="Free-form biography, must not be empty")


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "alice",
                "bio": "Rock climber and coffee snob",
                "followers": ["456e4567-e89b-12d3-a456-426614174000"],
                "following": [],
                "created_at": "2026-01-28T10:00:00",
                "updated_at": None,
            }
        },
    )

    id: UUID
    username: str
    bio: str
    followers: list[str]
    following: list[str]
    created_at: datetime
    updated_at: datetime | None = None


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse
