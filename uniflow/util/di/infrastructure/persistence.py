"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide

from uniflow.config import Settings
from uniflow.domain.repository import ProfileRepository, SetupTokenRepository
from uniflow.persistence.database import Database
from uniflow.persistence.repository import (
    PostgresProfileRepository,
    PostgresSetupTokenRepository,
    UnavailableProfileRepository,
    UnavailableSetupTokenRepository,
)
from uniflow.util.di.base import ProviderBase
from uniflow.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_database(self, settings: Settings) -> AsyncIterator[Database]:
        """Provide database engine holder; disposed when the app shuts down."""
        database = Database(settings)
        if database.engine is not None:
            instrument_sqlalchemy(database.engine)
        else:
            logfire.warn("Database URL not configured")
        yield database
        await database.dispose()

    @provide(scope=Scope.REQUEST)
    async def get_profile_repository(
        self, database: Database
    ) -> AsyncIterator[ProfileRepository]:
        """Provide Profile repository.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        if database.session_factory is None:
            yield UnavailableProfileRepository()
            return

        async with database.session_factory() as session:
            try:
                yield PostgresProfileRepository(session)
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    async def get_setup_token_repository(
        self, database: Database
    ) -> AsyncIterator[SetupTokenRepository]:
        """Provide SetupToken repository with the same commit/rollback rules."""
        if database.session_factory is None:
            yield UnavailableSetupTokenRepository()
            return

        async with database.session_factory() as session:
            try:
                yield PostgresSetupTokenRepository(session)
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise
