"""PostgreSQL implementation of Profile repository."""

from datetime import datetime
from typing import Any, Optional

import logfire
from sqlalchemy import select, text, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from uniflow.adapter.error import PersistenceError
from uniflow.domain.model import UserProfile
from uniflow.domain.repository import ProfileRepository
from uniflow.domain.value import AccountId
from uniflow.persistence.mappers import profile_fields_to_columns, row_to_profile
from uniflow.persistence.tables import user_profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(
        self, account_id: AccountId, fields: dict[str, Any], now: datetime
    ) -> UserProfile:
        """Insert or merge a profile in a single statement.

        Args:
            account_id: Profile id
            fields: Columns to write
            now: Write timestamp

        Returns:
            The stored profile
        """
        columns = profile_fields_to_columns(fields)

        stmt = insert(user_profiles_table).values(
            id=account_id, created_at=now, updated_at=now, **columns
        )
        # created_at is insert-only
        stmt = stmt.on_conflict_do_update(
            index_elements=[user_profiles_table.c.id],
            set_={**columns, "updated_at": now},
        ).returning(user_profiles_table)

        row = await self._execute_one(stmt)
        return row_to_profile(dict(row))

    async def find_by_id(self, account_id: AccountId) -> Optional[UserProfile]:
        """Find a profile by account id.

        Args:
            account_id: Account id to look up

        Returns:
            Profile if found, None otherwise
        """
        stmt = select(user_profiles_table).where(user_profiles_table.c.id == account_id)
        row = await self._execute_one(stmt)
        return row_to_profile(dict(row)) if row else None

    async def update(
        self, account_id: AccountId, fields: dict[str, Any], now: datetime
    ) -> Optional[UserProfile]:
        """Merge fields into an existing profile; never inserts."""
        stmt = (
            update(user_profiles_table)
            .where(user_profiles_table.c.id == account_id)
            .values(**profile_fields_to_columns(fields), updated_at=now)
            .returning(user_profiles_table)
        )
        row = await self._execute_one(stmt)
        return row_to_profile(dict(row)) if row else None

    async def ping(self) -> bool:
        await self._execute_one(text("SELECT 1"))
        return True

    async def _execute_one(self, stmt):
        """Execute and return the first row mapping, if any.

        Raises:
            PersistenceError: On any driver or connection error
        """
        try:
            result = await self.session.execute(stmt)
            return result.mappings().first()
        except (SQLAlchemyError, OSError) as e:
            logfire.error("Profile query failed", error=str(e))
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
