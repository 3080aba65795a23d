"""Check health use case."""

from datetime import datetime

from pydantic import BaseModel

from uniflow.application.usecase.base import BaseUseCase
from uniflow.config import Settings
from uniflow.domain.model.common import utc_now
from uniflow.domain.service import EmailClient, IdentityGateway, ProfileService

VERSION = "0.1.0"


class CheckHealthResponse(BaseModel):
    """Health check response.

    ``status`` is "ok" whenever the process answers; the flags report
    which collaborators are usable.
    """

    status: str = "ok"
    timestamp: datetime
    version: str
    git_sha: str
    identity_provider: bool
    database: bool
    email_delivery: bool


class CheckHealthUseCase(BaseUseCase):
    """Use case for reporting process and collaborator health."""

    def __init__(
        self,
        identity_gateway: IdentityGateway,
        email_client: EmailClient,
        profile_service: ProfileService,
        settings: Settings,
    ) -> None:
        """Initialize check health use case.

        Args:
            identity_gateway: Identity provider
            email_client: Email delivery client
            profile_service: Profile domain service (store ping)
            settings: Application settings
        """
        self.identity_gateway = identity_gateway
        self.email_client = email_client
        self.profile_service = profile_service
        self.settings = settings

    async def execute(self, request: None = None) -> CheckHealthResponse:
        """Execute health check; never raises for an unhealthy collaborator."""
        return CheckHealthResponse(
            timestamp=utc_now(),
            version=VERSION,
            git_sha=self.settings.git_sha,
            identity_provider=self.identity_gateway.is_configured,
            database=await self.profile_service.is_available(),
            email_delivery=self.email_client.is_configured,
        )
