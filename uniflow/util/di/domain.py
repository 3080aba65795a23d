"""Domain layer DI providers."""

from dishka import Scope, provide

from uniflow.config import EmailSettings, PasswordSetupSettings
from uniflow.domain.repository import ProfileRepository, SetupTokenRepository
from uniflow.domain.service import (
    AccountLinkingService,
    AuthenticationService,
    EmailClient,
    IdentityGateway,
    NotificationService,
    ProfileService,
    SetupTokenService,
)
from uniflow.util.di.base import ProviderBase
from uniflow.util.locks import KeyedLock


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_account_locks(self) -> KeyedLock:
        """Provide the process-wide per-account lock registry."""
        return KeyedLock()

    @provide
    def get_authentication_service(
        self, identity_gateway: IdentityGateway
    ) -> AuthenticationService:
        """Provide bearer token authentication service."""
        return AuthenticationService(identity_gateway)

    @provide
    def get_notification_service(
        self,
        email_client: EmailClient,
        email_settings: EmailSettings,
        password_setup_settings: PasswordSetupSettings,
    ) -> NotificationService:
        """Provide notification service."""
        return NotificationService(
            email_client, email_settings, password_setup_settings
        )

    @provide
    def get_setup_token_service(
        self,
        setup_token_repository: SetupTokenRepository,
        password_setup_settings: PasswordSetupSettings,
    ) -> SetupTokenService:
        """Provide setup token ledger service."""
        return SetupTokenService(setup_token_repository, password_setup_settings)

    @provide
    def get_account_linking_service(
        self,
        identity_gateway: IdentityGateway,
        setup_token_service: SetupTokenService,
        account_locks: KeyedLock,
    ) -> AccountLinkingService:
        """Provide account linking service."""
        return AccountLinkingService(
            identity_gateway, setup_token_service, account_locks
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile service."""
        return ProfileService(profile_repository)
