"""Email use cases."""

from .send_password_setup_email import SendPasswordSetupEmailUseCase
from .send_verification_email import SendVerificationEmailUseCase

__all__ = ["SendPasswordSetupEmailUseCase", "SendVerificationEmailUseCase"]
