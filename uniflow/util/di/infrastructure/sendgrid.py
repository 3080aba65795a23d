"""SendGrid infrastructure providers."""

from dishka import Scope, provide

from uniflow.adapter.sendgrid import RealSendGridEmailClient
from uniflow.config import EmailSettings
from uniflow.domain.service import EmailClient
from uniflow.util.di.base import ProviderBase


class SendGridProvider(ProviderBase):
    """SendGrid component base."""

    __mock_component__ = "sendgrid"


class ProdSendGridProvider(SendGridProvider):
    """Production SendGrid provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, email_settings: EmailSettings) -> EmailClient:
        """Provide SendGrid email client (unconfigured without an API key)."""
        return RealSendGridEmailClient(
            api_key=email_settings.sendgrid_api_key,
            from_email=email_settings.from_email,
            from_name=email_settings.from_name,
            timeout=email_settings.timeout_seconds,
        )
