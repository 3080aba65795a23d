"""In-memory profile repository for testing."""

from datetime import datetime
from typing import Any, Optional

from uniflow.domain.model import UserProfile
from uniflow.domain.repository.profile import ProfileRepository
from uniflow.domain.value import AccountId
from uniflow.persistence.mappers import profile_fields_to_columns


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[str, UserProfile] = {}
        self.writes = 0

    async def upsert(
        self, account_id: AccountId, fields: dict[str, Any], now: datetime
    ) -> UserProfile:
        """Insert or merge a profile."""
        existing = self._profiles.get(account_id)
        columns = profile_fields_to_columns(fields)
        if existing:
            profile = existing.model_copy(update={**columns, "updated_at": now})
        else:
            profile = UserProfile(
                id=account_id, created_at=now, updated_at=now, **columns
            )
        self._profiles[account_id] = profile
        self.writes += 1
        return profile

    async def find_by_id(self, account_id: AccountId) -> Optional[UserProfile]:
        """Find a profile by account id."""
        return self._profiles.get(account_id)

    async def update(
        self, account_id: AccountId, fields: dict[str, Any], now: datetime
    ) -> Optional[UserProfile]:
        """Merge fields into an existing profile."""
        existing = self._profiles.get(account_id)
        if existing is None:
            return None
        profile = existing.model_copy(
            update={**profile_fields_to_columns(fields), "updated_at": now}
        )
        self._profiles[account_id] = profile
        self.writes += 1
        return profile

    async def ping(self) -> bool:
        return True
