"""User profile document.

One profile per identity provider account, keyed by the account id.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from uniflow.domain.model.common import DomainModel
from uniflow.domain.value import AccountId


class UserProfile(DomainModel):
    """Stored profile document.

    ``created_at`` is written once when the document is first inserted;
    ``updated_at`` moves on every write.
    """

    id: AccountId
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
