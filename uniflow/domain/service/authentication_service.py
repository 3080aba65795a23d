"""Bearer token authentication domain service."""

import logfire

from uniflow.domain.error import ServiceUnavailableError, UnauthenticatedError
from uniflow.domain.model import Principal

from .base import Service
from .identity_gateway import (
    IdentityGateway,
    IdentityProviderError,
    TokenVerificationError,
)

BEARER_PREFIX = "Bearer "


class AuthenticationService(Service):
    """Admits requests carrying a valid identity provider bearer token."""

    def __init__(self, identity_gateway: IdentityGateway) -> None:
        """Initialize authentication service.

        Args:
            identity_gateway: Identity provider used to verify tokens
        """
        self.identity_gateway = identity_gateway

    async def authenticate(self, authorization: str | None) -> Principal:
        """Authenticate an ``Authorization`` header value.

        Missing and invalid credentials produce the same error kind; they
        differ only in what gets logged.

        Args:
            authorization: Raw header value, if any

        Returns:
            Verified principal

        Raises:
            UnauthenticatedError: If the header is absent, malformed or the
                token fails verification
            ServiceUnavailableError: If the identity provider is not configured
        """
        with logfire.span("authentication_service.authenticate"):
            if not authorization or not authorization.startswith(BEARER_PREFIX):
                logfire.warn(
                    "Missing bearer credential", header_present=bool(authorization)
                )
                raise UnauthenticatedError("No authorization token provided")

            token = authorization[len(BEARER_PREFIX) :].strip()
            if not token:
                logfire.warn("Empty bearer credential")
                raise UnauthenticatedError("No authorization token provided")

            if not self.identity_gateway.is_configured:
                logfire.error("Identity provider not configured")
                raise ServiceUnavailableError(
                    "identity_provider", "Identity provider not configured"
                )

            try:
                principal = await self.identity_gateway.verify_token(token)
            except TokenVerificationError as e:
                logfire.warn("Token verification failed", error=str(e))
                raise UnauthenticatedError("Invalid or expired token") from e
            except IdentityProviderError as e:
                # e.g. signing keys unreachable; still not retried per request
                logfire.error("Token verification unavailable", error=str(e))
                raise UnauthenticatedError("Invalid or expired token") from e

            logfire.info("Request authenticated", account_id=principal.account_id)
            return principal
