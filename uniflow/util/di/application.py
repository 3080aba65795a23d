"""Application layer DI providers."""

from dishka import Scope, provide

from uniflow.application.usecase.account import (
    CheckSetupLinkUseCase,
    SetupPasswordUseCase,
)
from uniflow.application.usecase.email import (
    SendPasswordSetupEmailUseCase,
    SendVerificationEmailUseCase,
)
from uniflow.application.usecase.health import CheckHealthUseCase
from uniflow.application.usecase.profile import (
    GetProfileUseCase,
    SaveProfileUseCase,
    UpdateProfileUseCase,
)
from uniflow.config import Settings
from uniflow.domain.service import (
    AccountLinkingService,
    EmailClient,
    IdentityGateway,
    NotificationService,
    ProfileService,
    SetupTokenService,
)
from uniflow.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Email use cases
    @provide(scope=Scope.REQUEST)
    def get_send_verification_email_use_case(
        self, notification_service: NotificationService
    ) -> SendVerificationEmailUseCase:
        """Provide send verification email use case."""
        return SendVerificationEmailUseCase(notification_service)

    @provide(scope=Scope.REQUEST)
    def get_send_password_setup_email_use_case(
        self,
        notification_service: NotificationService,
        setup_token_service: SetupTokenService,
    ) -> SendPasswordSetupEmailUseCase:
        """Provide send password setup email use case."""
        return SendPasswordSetupEmailUseCase(notification_service, setup_token_service)

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_setup_password_use_case(
        self, account_linking_service: AccountLinkingService
    ) -> SetupPasswordUseCase:
        """Provide set up password use case."""
        return SetupPasswordUseCase(account_linking_service)

    @provide(scope=Scope.REQUEST)
    def get_check_setup_link_use_case(
        self, setup_token_service: SetupTokenService
    ) -> CheckSetupLinkUseCase:
        """Provide check setup link use case."""
        return CheckSetupLinkUseCase(setup_token_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_save_profile_use_case(
        self, profile_service: ProfileService
    ) -> SaveProfileUseCase:
        """Provide save profile use case."""
        return SaveProfileUseCase(profile_service)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service)

    # Health
    @provide(scope=Scope.REQUEST)
    def get_check_health_use_case(
        self,
        identity_gateway: IdentityGateway,
        email_client: EmailClient,
        profile_service: ProfileService,
        settings: Settings,
    ) -> CheckHealthUseCase:
        """Provide check health use case."""
        return CheckHealthUseCase(
            identity_gateway, email_client, profile_service, settings
        )
