"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from uniflow.config import EmailSettings, PasswordSetupSettings, Settings
from uniflow.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        """Provide email settings."""
        return settings.email

    @provide(scope=Scope.APP)
    def provide_password_setup_settings(
        self, settings: Settings
    ) -> PasswordSetupSettings:
        """Provide password setup settings."""
        return settings.password_setup
