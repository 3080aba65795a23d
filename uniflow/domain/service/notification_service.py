"""Transactional email domain service."""

import logfire

from uniflow.config import EmailSettings, PasswordSetupSettings
from uniflow.domain.error import DeliveryFailedError, ServiceUnavailableError
from uniflow.domain.value import EmailMessage

from .base import Service
from .email_templates import password_setup_email, verification_code_email


class EmailDeliveryError(Exception):
    """Email provider rejected or failed a send."""

    pass


class EmailClient:
    """Generic transactional email interface."""

    @property
    def is_configured(self) -> bool:
        """Whether provider credentials are present."""
        raise NotImplementedError

    async def send(self, message: EmailMessage) -> None:
        """Deliver one message.

        Raises:
            EmailDeliveryError: If the provider does not accept the message
        """
        raise NotImplementedError


class NotificationService(Service):
    """Sends verification codes and password setup links.

    One delivery attempt per call and no deduplication: calling twice
    sends two emails.
    """

    def __init__(
        self,
        email_client: EmailClient,
        email_settings: EmailSettings,
        password_setup_settings: PasswordSetupSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            email_client: Email delivery client
            email_settings: Email settings
            password_setup_settings: Password setup settings (link validity)
        """
        self.email_client = email_client
        self.email_settings = email_settings
        self.password_setup_settings = password_setup_settings

    async def send_verification_code(self, email: str, code: str) -> None:
        """Email a pre-generated verification code.

        Raises:
            ServiceUnavailableError: If email delivery is not configured
            DeliveryFailedError: If the provider fails the send
        """
        message = verification_code_email(
            email, code, self.email_settings.verification_code_ttl_minutes
        )
        with logfire.span("notification_service.send_verification_code"):
            await self._deliver(message, "Failed to send verification email")

    async def send_password_setup_link(self, email: str, setup_url: str) -> None:
        """Email a password setup link.

        Raises:
            ServiceUnavailableError: If email delivery is not configured
            DeliveryFailedError: If the provider fails the send
        """
        message = password_setup_email(
            email, setup_url, self.password_setup_settings.token_ttl_hours
        )
        with logfire.span("notification_service.send_password_setup_link"):
            await self._deliver(message, "Failed to send password setup email")

    def require_configured(self) -> None:
        """Fail fast when no email provider is configured.

        Raises:
            ServiceUnavailableError: If email delivery is not configured
        """
        if not self.email_client.is_configured:
            logfire.error("Email delivery not configured")
            raise ServiceUnavailableError(
                "email_delivery", "Email delivery not configured"
            )

    async def _deliver(self, message: EmailMessage, failure_message: str) -> None:
        self.require_configured()

        try:
            await self.email_client.send(message)
        except EmailDeliveryError as e:
            logfire.error(failure_message, subject=message.subject, error=str(e))
            raise DeliveryFailedError(failure_message, details=str(e)) from e

        logfire.info("Email sent", subject=message.subject)
