"""Send verification email use case."""

from pydantic import BaseModel

from uniflow.application.usecase.base import BaseUseCase, MessageResponse
from uniflow.domain.service import NotificationService, require_fields


class SendVerificationEmailRequest(BaseModel):
    """Send verification email request."""

    email: str | None = None
    # Generated and later checked by the client; numbers are accepted as-is
    code: str | int | None = None


class SendVerificationEmailUseCase(BaseUseCase):
    """Use case for emailing a one-time verification code."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize send verification email use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: SendVerificationEmailRequest) -> MessageResponse:
        """Execute send verification email flow.

        Raises:
            MissingFieldsError: If email or code is missing, empty or 0
            ServiceUnavailableError: If email delivery is not configured
            DeliveryFailedError: If the provider fails the send
        """
        # A numeric 0 counts as missing, like an empty string
        require_fields(email=request.email, code=request.code or None)

        await self.notification_service.send_verification_code(
            request.email, str(request.code)
        )

        return MessageResponse(message="Verification email sent successfully")
