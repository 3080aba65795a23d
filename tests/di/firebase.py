"""Mock Firebase providers for testing."""

from dishka import Scope, alias, provide

from uniflow.adapter.firebase import MockFirebaseIdentityGateway
from uniflow.domain.service import IdentityGateway
from uniflow.util.di.infrastructure.firebase import FirebaseProvider


class MockFirebaseProvider(FirebaseProvider):
    """Mock Firebase provider using an in-memory identity gateway.

    Tests resolve ``MockFirebaseIdentityGateway`` to seed accounts and
    issue tokens; services receive the same instance as ``IdentityGateway``.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_identity_gateway(self) -> MockFirebaseIdentityGateway:
        """Provide mock identity gateway."""
        return MockFirebaseIdentityGateway()

    identity_gateway = alias(source=MockFirebaseIdentityGateway, provides=IdentityGateway)
