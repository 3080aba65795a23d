"""Check password setup link use case."""

from pydantic import BaseModel

from uniflow.application.usecase.base import BaseUseCase
from uniflow.domain.error import MissingFieldsError
from uniflow.domain.service import SetupTokenService, require_fields
from uniflow.domain.value import EmailAddress, SetupToken


class CheckSetupLinkRequest(BaseModel):
    """Check setup link request (query parameters of the setup URL)."""

    email: str | None = None
    token: str | None = None


class CheckSetupLinkResponse(BaseModel):
    """Check setup link response."""

    valid: bool
    email: str | None = None
    token: str | None = None


class CheckSetupLinkUseCase(BaseUseCase):
    """Use case for deciding whether to render the password setup form.

    Never consumes the token; consumption happens when the form is posted.
    """

    def __init__(self, setup_token_service: SetupTokenService) -> None:
        """Initialize check setup link use case.

        Args:
            setup_token_service: Setup token ledger
        """
        self.setup_token_service = setup_token_service

    async def execute(self, request: CheckSetupLinkRequest) -> CheckSetupLinkResponse:
        """Execute setup link check."""
        try:
            require_fields(email=request.email, token=request.token)
        except MissingFieldsError:
            return CheckSetupLinkResponse(valid=False)

        email = EmailAddress(request.email)
        valid = await self.setup_token_service.check(email, SetupToken(request.token))
        return CheckSetupLinkResponse(
            valid=valid, email=email.root, token=request.token
        )
