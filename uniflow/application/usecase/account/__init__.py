"""Account use cases."""

from .check_setup_link import CheckSetupLinkUseCase
from .setup_password import SetupPasswordUseCase

__all__ = ["CheckSetupLinkUseCase", "SetupPasswordUseCase"]
