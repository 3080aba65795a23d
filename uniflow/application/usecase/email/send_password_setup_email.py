"""Send password setup email use case."""

from pydantic import BaseModel

from uniflow.application.usecase.base import BaseUseCase, MessageResponse
from uniflow.domain.service import (
    NotificationService,
    SetupTokenService,
    require_fields,
)
from uniflow.domain.value import EmailAddress, SetupToken


class SendPasswordSetupEmailRequest(BaseModel):
    """Send password setup email request."""

    email: str | None = None
    token: str | None = None
    setup_url: str | None = None


class SendPasswordSetupEmailUseCase(BaseUseCase):
    """Use case for emailing a password setup link to a federated-only account."""

    def __init__(
        self,
        notification_service: NotificationService,
        setup_token_service: SetupTokenService,
    ) -> None:
        """Initialize send password setup email use case.

        Args:
            notification_service: Notification domain service
            setup_token_service: Setup token ledger
        """
        self.notification_service = notification_service
        self.setup_token_service = setup_token_service

    async def execute(self, request: SendPasswordSetupEmailRequest) -> MessageResponse:
        """Execute send password setup email flow.

        Steps:
        1. Check required fields
        2. Check that email delivery is configured
        3. Record the token (only when the token ledger is enforced)
        4. Send the email

        Raises:
            MissingFieldsError: If email, token or setupUrl is missing
            ServiceUnavailableError: If email delivery is not configured
            InvalidSetupTokenError: If the token was already issued for another
                address, or is used or expired
            StorageError: If the token ledger fails
            DeliveryFailedError: If the provider fails the send
        """
        require_fields(
            **{"email": request.email, "token": request.token, "setupUrl": request.setup_url}
        )

        self.notification_service.require_configured()
        await self.setup_token_service.record(
            EmailAddress(request.email), SetupToken(request.token)
        )
        await self.notification_service.send_password_setup_link(
            request.email, request.setup_url
        )

        return MessageResponse(message="Password setup email sent successfully")
