"""In-memory setup token repository for testing."""

from datetime import datetime
from typing import Optional

from uniflow.domain.model import SetupTokenRecord
from uniflow.domain.repository.setup_token import SetupTokenRepository


class InMemorySetupTokenRepository(SetupTokenRepository):
    """In-memory implementation of SetupTokenRepository for testing.

    ``consume`` has no await between check and write, so it is atomic
    within one event loop.
    """

    def __init__(self) -> None:
        self._records: dict[str, SetupTokenRecord] = {}

    async def save(self, record: SetupTokenRecord) -> Optional[SetupTokenRecord]:
        """Store a newly issued token; keeps an existing record with the same hash."""
        if record.token_hash in self._records:
            return None
        self._records[record.token_hash] = record
        return record

    async def find_by_hash(self, token_hash: str) -> Optional[SetupTokenRecord]:
        """Find a token record by digest."""
        return self._records.get(token_hash)

    async def consume(
        self, token_hash: str, email: str, now: datetime
    ) -> Optional[SetupTokenRecord]:
        """Mark a usable token consumed."""
        record = self._records.get(token_hash)
        if record is None or record.email != email or not record.is_usable(now):
            return None
        consumed = record.model_copy(update={"consumed_at": now})
        self._records[token_hash] = consumed
        return consumed
