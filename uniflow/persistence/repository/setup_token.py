"""PostgreSQL implementation of SetupToken repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import and_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from uniflow.adapter.error import PersistenceError
from uniflow.domain.model import SetupTokenRecord
from uniflow.domain.repository import SetupTokenRepository
from uniflow.persistence.mappers import row_to_setup_token, setup_token_to_dict
from uniflow.persistence.tables import setup_tokens_table


class PostgresSetupTokenRepository(SetupTokenRepository):
    """PostgreSQL implementation of SetupTokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, record: SetupTokenRecord) -> Optional[SetupTokenRecord]:
        """Store a newly issued token; keeps an existing record with the same hash."""
        stmt = (
            insert(setup_tokens_table)
            .values(**setup_token_to_dict(record))
            .on_conflict_do_nothing(index_elements=["token_hash"])
            .returning(setup_tokens_table)
        )
        row = await self._execute_one(stmt)
        return row_to_setup_token(dict(row)) if row else None

    async def find_by_hash(self, token_hash: str) -> Optional[SetupTokenRecord]:
        """Find a token record by digest."""
        stmt = select(setup_tokens_table).where(
            setup_tokens_table.c.token_hash == token_hash
        )
        row = await self._execute_one(stmt)
        return row_to_setup_token(dict(row)) if row else None

    async def consume(
        self, token_hash: str, email: str, now: datetime
    ) -> Optional[SetupTokenRecord]:
        """Mark a usable token consumed with one conditional UPDATE.

        Concurrent consumers of the same row serialize on its row lock; the
        loser re-evaluates the WHERE clause and matches nothing.
        """
        stmt = (
            update(setup_tokens_table)
            .where(
                and_(
                    setup_tokens_table.c.token_hash == token_hash,
                    setup_tokens_table.c.email == email,
                    setup_tokens_table.c.consumed_at.is_(None),
                    setup_tokens_table.c.expires_at > now,
                )
            )
            .values(consumed_at=now)
            .returning(setup_tokens_table)
        )
        row = await self._execute_one(stmt)
        return row_to_setup_token(dict(row)) if row else None

    async def _execute_one(self, stmt):
        try:
            result = await self.session.execute(stmt)
            return result.mappings().first()
        except (SQLAlchemyError, OSError) as e:
            logfire.error("Setup token query failed", error=str(e))
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
