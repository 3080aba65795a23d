"""SendGrid email adapter."""

from .client import (
    MockSendGridEmailClient,
    RealSendGridEmailClient,
    SendGridEmailClient,
    SendGridError,
)

__all__ = [
    "MockSendGridEmailClient",
    "RealSendGridEmailClient",
    "SendGridEmailClient",
    "SendGridError",
]
