"""Password setup token repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from uniflow.domain.model import SetupTokenRecord


class SetupTokenRepository(ABC):
    """Repository for issued password setup tokens."""

    @abstractmethod
    async def save(self, record: SetupTokenRecord) -> Optional[SetupTokenRecord]:
        """Store a newly issued token.

        Returns:
            The stored record, or None if a record with the same
            ``token_hash`` already exists (the existing one is kept)
        """
        pass

    @abstractmethod
    async def find_by_hash(self, token_hash: str) -> Optional[SetupTokenRecord]:
        """Find a token record by digest."""
        pass

    @abstractmethod
    async def consume(
        self, token_hash: str, email: str, now: datetime
    ) -> Optional[SetupTokenRecord]:
        """Atomically mark a usable token as consumed.

        A token is usable when it matches ``email``, has not expired at
        ``now`` and was not consumed before.

        Returns:
            The consumed record, or None if no usable token matched
        """
        pass
