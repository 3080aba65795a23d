"""SendGrid v3 mail client.

Sends one message per call through ``POST /v3/mail/send``; SendGrid
answers ``202 Accepted`` when the message is queued.
"""

import httpx
import logfire

from uniflow.adapter.error import ProviderError
from uniflow.domain.service.notification_service import EmailClient, EmailDeliveryError
from uniflow.domain.value import EmailMessage

SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridError(ProviderError, EmailDeliveryError):
    """SendGrid rejected or failed a send."""

    pass


class SendGridEmailClient(EmailClient):
    """Base class for SendGrid email clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealSendGridEmailClient(SendGridEmailClient):
    """SendGrid client over the v3 REST API."""

    def __init__(
        self,
        api_key: str | None,
        from_email: str,
        from_name: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize SendGrid client.

        Args:
            api_key: SendGrid API key; None leaves the client unconfigured
            from_email: Verified sender address
            from_name: Sender display name
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.from_email = from_email
        self.from_name = from_name
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, message: EmailMessage) -> dict:
        sender = {"email": self.from_email}
        if self.from_name:
            sender["name"] = self.from_name

        return {
            "personalizations": [{"to": [{"email": message.to}]}],
            "from": sender,
            "subject": message.subject,
            # SendGrid requires text/plain before text/html
            "content": [
                {"type": "text/plain", "value": message.text},
                {"type": "text/html", "value": message.html},
            ],
        }

    async def send(self, message: EmailMessage) -> None:
        """Send one message.

        Raises:
            SendGridError: On transport errors or a non-2xx response
        """
        if not self.api_key:
            raise SendGridError("SendGrid API key not configured")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    SEND_URL,
                    json=self.build_payload(message),
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=self.timeout,
                )

                if response.status_code not in (200, 202):
                    logfire.error(
                        "SendGrid send failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise SendGridError(_error_message(response))

                logfire.info(
                    "SendGrid accepted message",
                    subject=message.subject,
                    message_id=response.headers.get("x-message-id"),
                )

        except httpx.HTTPError as e:
            logfire.error("SendGrid HTTP error", error=str(e))
            raise SendGridError(f"HTTP error sending email: {e}") from e


def _error_message(response: httpx.Response) -> str:
    """Join the messages of a SendGrid ``{"errors": [...]}`` body."""
    try:
        errors = response.json()["errors"]
        return "; ".join(error["message"] for error in errors)
    except (ValueError, KeyError, TypeError):
        return f"SendGrid request failed: {response.status_code}"


class MockSendGridEmailClient(SendGridEmailClient):
    """Mock SendGrid client for testing.

    Records messages instead of sending them.
    """

    def __init__(self, configured: bool = True, fail_with: str | None = None):
        """Initialize mock client without real SendGrid configuration."""
        self.configured = configured
        self.fail_with = fail_with
        self.sent: list[EmailMessage] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def send(self, message: EmailMessage) -> None:
        if self.fail_with:
            raise SendGridError(self.fail_with)
        self.sent.append(message)
