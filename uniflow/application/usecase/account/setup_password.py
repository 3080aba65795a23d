"""Set up password use case."""

from pydantic import BaseModel

from uniflow.application.usecase.base import BaseUseCase, MessageResponse
from uniflow.domain.service import AccountLinkingService


class SetupPasswordRequest(BaseModel):
    """Set up password request."""

    email: str | None = None
    password: str | None = None
    token: str | None = None


class SetupPasswordUseCase(BaseUseCase):
    """Use case for adding a password to a federated-only account."""

    def __init__(self, account_linking_service: AccountLinkingService) -> None:
        """Initialize set up password use case.

        Args:
            account_linking_service: Account linking domain service
        """
        self.account_linking_service = account_linking_service

    async def execute(self, request: SetupPasswordRequest) -> MessageResponse:
        """Execute password setup flow.

        Raises:
            MissingFieldsError: If email, password or token is missing
            ServiceUnavailableError: If the identity provider is not configured
            AccountNotFoundError: If no account uses the email
            AlreadyLinkedError: If the account already has a password
            InvalidSetupTokenError: If the token ledger rejects the token
            LinkingError: If the identity provider fails
        """
        await self.account_linking_service.link_password(
            request.email, request.password, request.token
        )

        return MessageResponse(
            message="Password set successfully. You can now sign in with email and password."
        )
