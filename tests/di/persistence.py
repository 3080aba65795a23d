"""Mock persistence providers for testing."""

from dishka import Scope, provide

from uniflow.domain.repository import ProfileRepository, SetupTokenRepository
from uniflow.persistence.repository.inmemory import (
    InMemoryProfileRepository,
    InMemorySetupTokenRepository,
)
from uniflow.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data survives across requests to one app; each test
    builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()

    @provide(scope=Scope.APP)
    def get_setup_token_repository(self) -> SetupTokenRepository:
        """Provide in-memory setup token repository."""
        return InMemorySetupTokenRepository()
