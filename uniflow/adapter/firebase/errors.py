"""Firebase adapter errors."""

from uniflow.adapter.error import ProviderError
from uniflow.domain.service.identity_gateway import (
    IdentityProviderError,
    TokenVerificationError,
)


class FirebaseAuthError(ProviderError, IdentityProviderError):
    """Firebase Authentication call failed."""

    pass


class FirebaseTokenError(FirebaseAuthError, TokenVerificationError):
    """Firebase ID token failed verification."""

    pass
