"""Domain value objects for UniFlow.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import hashlib
from typing import Any

from pydantic import Field, field_validator

from uniflow.domain.value.common import RootValueObject, ValueObject

# Provider id the identity provider uses for email/password credentials
PASSWORD_PROVIDER = "password"


class EmailAddress(RootValueObject[str]):
    """Email address normalized for lookups.

    The identity provider stores addresses case-sensitively while the
    product treats them as case-insensitive, so every lookup key is
    stripped and lower-cased.
    """

    @field_validator("root")
    @classmethod
    def normalize(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("Email must not be empty")
        return v


class SetupToken(RootValueObject[str]):
    """Opaque password setup token delivered inside a setup URL.

    Any non-empty string is accepted; only its digest is ever stored, so
    the length is unbounded.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        if not v:
            raise ValueError("Token must not be empty")
        return v

    def digest(self) -> str:
        """SHA-256 hex digest; only the digest is ever stored."""
        return hashlib.sha256(self.root.encode()).hexdigest()

    def redacted(self) -> str:
        return self.root[:8] + "..."


class EmailMessage(ValueObject):
    """A rendered transactional email."""

    to: str
    subject: str
    html: str
    text: str


class ProfileFields(ValueObject):
    """Allow-listed profile fields a client may write.

    Only fields explicitly set by the caller are merged into the stored
    profile (see ``model_fields_set``). Anything client-specific goes
    into ``extensions``, an opaque JSON object stored as-is.
    """

    display_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=320)
    photo_url: str | None = Field(default=None, max_length=2048)
    university: str | None = Field(default=None, max_length=255)
    major: str | None = Field(default=None, max_length=255)
    graduation_year: int | None = Field(default=None, ge=1900, le=2100)
    bio: str | None = Field(default=None, max_length=500)
    extensions: dict[str, Any] | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller set, keyed by field name."""
        return self.model_dump(include=self.model_fields_set)
