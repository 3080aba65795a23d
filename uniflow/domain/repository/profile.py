"""Profile repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from uniflow.domain.model import UserProfile
from uniflow.domain.value import AccountId


class ProfileRepository(ABC):
    """Repository for UserProfile documents.

    ``fields`` arguments are partial mappings of ``ProfileFields`` names to
    values; only those keys are written.
    """

    @abstractmethod
    async def upsert(
        self, account_id: AccountId, fields: dict[str, Any], now: datetime
    ) -> UserProfile:
        """Insert or merge a profile.

        ``created_at`` is set to ``now`` only when the document is inserted;
        ``updated_at`` is always set to ``now``.

        Returns:
            The stored profile after the write
        """
        pass

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[UserProfile]:
        """Find a profile by account id.

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(
        self, account_id: AccountId, fields: dict[str, Any], now: datetime
    ) -> Optional[UserProfile]:
        """Merge fields into an existing profile.

        Never creates a document.

        Returns:
            The updated profile, or None if no profile exists (nothing written)
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the backing store answers."""
        pass
