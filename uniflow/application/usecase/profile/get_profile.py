"""Get profile use case."""

from pydantic import BaseModel

from uniflow.application.usecase.base import BaseUseCase
from uniflow.domain.service import ProfileService
from uniflow.domain.value import AccountId

from .common import ProfileResponse, ProfileView


class GetProfileRequest(BaseModel):
    """Get profile request."""

    account_id: str  # From authenticated principal


class GetProfileUseCase(BaseUseCase):
    """Use case for reading the caller's own profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Execute get profile flow.

        Raises:
            ProfileNotFoundError: If the caller has no profile yet
            ServiceUnavailableError: If no database is configured
            StorageError: If the store fails
        """
        profile = await self.profile_service.get(AccountId(request.account_id))
        return ProfileResponse(user=ProfileView.from_profile(profile))
