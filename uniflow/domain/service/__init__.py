"""Domain services."""

from .account_linking_service import AccountLinkingService
from .authentication_service import AuthenticationService
from .base import Service, require_fields
from .identity_gateway import (
    IdentityGateway,
    IdentityProviderError,
    TokenVerificationError,
)
from .notification_service import EmailClient, EmailDeliveryError, NotificationService
from .profile_service import ProfileService
from .setup_token_service import SetupTokenService

__all__ = [
    "AccountLinkingService",
    "AuthenticationService",
    "EmailClient",
    "EmailDeliveryError",
    "IdentityGateway",
    "IdentityProviderError",
    "NotificationService",
    "ProfileService",
    "Service",
    "SetupTokenService",
    "TokenVerificationError",
    "require_fields",
]
