"""Bearer token authentication dependency."""

from fastapi import Header, Request

from uniflow.domain.model import Principal
from uniflow.domain.service import AuthenticationService


async def require_principal(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Principal:
    """Authenticate the request before the endpoint body runs.

    Resolves ``AuthenticationService`` from the request-scoped container
    that dishka attaches to ``request.state``.

    Raises:
        UnauthenticatedError: If the bearer token is missing or invalid
        ServiceUnavailableError: If the identity provider is not configured
    """
    container = request.state.dishka_container
    authentication_service = await container.get(AuthenticationService)
    return await authentication_service.authenticate(authorization)
