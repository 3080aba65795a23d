"""Firebase Authentication adapter."""

from .auth import (
    FirebaseIdentityGateway,
    MockFirebaseIdentityGateway,
    RealFirebaseIdentityGateway,
    UnconfiguredFirebaseIdentityGateway,
)
from .errors import FirebaseAuthError, FirebaseTokenError

__all__ = [
    "FirebaseAuthError",
    "FirebaseIdentityGateway",
    "FirebaseTokenError",
    "MockFirebaseIdentityGateway",
    "RealFirebaseIdentityGateway",
    "UnconfiguredFirebaseIdentityGateway",
]
