"""Transactional email routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from uniflow.application.usecase.base import MessageResponse
from uniflow.application.usecase.email import (
    SendPasswordSetupEmailUseCase,
    SendVerificationEmailUseCase,
)
from uniflow.application.usecase.email.send_password_setup_email import (
    SendPasswordSetupEmailRequest,
)
from uniflow.application.usecase.email.send_verification_email import (
    SendVerificationEmailRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["email"], route_class=DishkaRoute)


class SendPasswordSetupEmailAPIRequest(BaseModel):
    """API request for sending a password setup email."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    token: str | None = None
    setup_url: str | None = Field(default=None, alias="setupUrl")


@router.post("/send-verification-email", response_model=MessageResponse)
async def send_verification_email(
    request: SendVerificationEmailRequest,
    send_verification_email_use_case: FromDishka[SendVerificationEmailUseCase],
) -> MessageResponse:
    """Email a pre-generated verification code.

    Example:
        POST /api/send-verification-email

        Request:
        {"email": "student@uni.edu", "code": "482913"}

        Response:
        {"success": true, "message": "Verification email sent successfully"}
    """
    response = await send_verification_email_use_case.execute(request)
    logger.info("Verification email dispatched")
    return response


@router.post("/send-password-setup-email", response_model=MessageResponse)
async def send_password_setup_email(
    request: SendPasswordSetupEmailAPIRequest,
    send_password_setup_email_use_case: FromDishka[SendPasswordSetupEmailUseCase],
) -> MessageResponse:
    """Email a password setup link to a federated-only account.

    Example:
        POST /api/send-password-setup-email

        Request:
        {
            "email": "student@uni.edu",
            "token": "6f1c...",
            "setupUrl": "https://api.uniflow.app/api/setup-password?token=6f1c...&email=student%40uni.edu"
        }
    """
    response = await send_password_setup_email_use_case.execute(
        SendPasswordSetupEmailRequest(
            email=request.email, token=request.token, setup_url=request.setup_url
        )
    )
    logger.info("Password setup email dispatched")
    return response
