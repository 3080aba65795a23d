"""Shared profile response models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from uniflow.domain.model import UserProfile


def to_profile_key(name: str) -> str:
    """Client-facing key for a profile field (camelCase, but ``photoURL``)."""
    return "photoURL" if name == "photo_url" else to_camel(name)


class ProfileView(BaseModel):
    """Profile document as returned to clients (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_profile_key, populate_by_name=True)

    id: str
    display_name: str | None = None
    email: str | None = None
    photo_url: str | None = None
    university: str | None = None
    major: str | None = None
    graduation_year: int | None = None
    bio: str | None = None
    extensions: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileView":
        return cls.model_validate(profile.model_dump())


class ProfileResponse(BaseModel):
    """Profile success envelope."""

    success: bool = True
    user: ProfileView
