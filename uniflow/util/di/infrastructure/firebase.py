"""Firebase infrastructure providers."""

import logfire
from dishka import Scope, provide

from uniflow.adapter.firebase import (
    RealFirebaseIdentityGateway,
    UnconfiguredFirebaseIdentityGateway,
)
from uniflow.config import Settings
from uniflow.domain.service import IdentityGateway
from uniflow.util.di.base import ProviderBase


class FirebaseProvider(ProviderBase):
    """Firebase component base."""

    __mock_component__ = "firebase"


class ProdFirebaseProvider(FirebaseProvider):
    """Production Firebase provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_gateway(self, settings: Settings) -> IdentityGateway:
        """Provide the Firebase identity gateway.

        Returns an unconfigured gateway when service account credentials
        are missing; callers report that as unavailable.
        """
        firebase = settings.firebase
        if not firebase.is_configured:
            logfire.warn("Firebase credentials not configured")
            return UnconfiguredFirebaseIdentityGateway()

        return RealFirebaseIdentityGateway(
            project_id=firebase.project_id,
            client_email=firebase.client_email,
            private_key=firebase.normalized_private_key,
            timeout=firebase.timeout_seconds,
        )
