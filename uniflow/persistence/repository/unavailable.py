"""Repositories used when no database is configured.

Every data operation fails with ``ServiceUnavailableError`` so the process
can start and report the missing store instead of crashing on boot.
"""

from datetime import datetime
from typing import Any, NoReturn, Optional

from uniflow.domain.error import ServiceUnavailableError
from uniflow.domain.model import SetupTokenRecord, UserProfile
from uniflow.domain.repository import ProfileRepository, SetupTokenRepository
from uniflow.domain.value import AccountId


def _unavailable() -> NoReturn:
    raise ServiceUnavailableError("database", "Database not connected")


class UnavailableProfileRepository(ProfileRepository):
    async def upsert(
        self, account_id: AccountId, fields: dict[str, Any], now: datetime
    ) -> UserProfile:
        _unavailable()

    async def find_by_id(self, account_id: AccountId) -> Optional[UserProfile]:
        _unavailable()

    async def update(
        self, account_id: AccountId, fields: dict[str, Any], now: datetime
    ) -> Optional[UserProfile]:
        _unavailable()

    async def ping(self) -> bool:
        return False


class UnavailableSetupTokenRepository(SetupTokenRepository):
    async def save(self, record: SetupTokenRecord) -> Optional[SetupTokenRecord]:
        _unavailable()

    async def find_by_hash(self, token_hash: str) -> Optional[SetupTokenRecord]:
        _unavailable()

    async def consume(
        self, token_hash: str, email: str, now: datetime
    ) -> Optional[SetupTokenRecord]:
        _unavailable()
