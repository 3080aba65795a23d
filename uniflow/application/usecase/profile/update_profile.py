"""Update profile use case."""

from pydantic import BaseModel

from uniflow.application.usecase.base import BaseUseCase
from uniflow.domain.service import ProfileService
from uniflow.domain.value import AccountId, ProfileFields

from .common import ProfileResponse, ProfileView


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    account_id: str  # From authenticated principal
    fields: ProfileFields


class UpdateProfileUseCase(BaseUseCase):
    """Use case for merging fields into the caller's existing profile.

    Unlike save, this never creates a profile.
    """

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute profile update.

        Raises:
            ProfileNotFoundError: If the caller has no profile
            ServiceUnavailableError: If no database is configured
            StorageError: If the store fails
        """
        profile = await self.profile_service.update(
            AccountId(request.account_id), request.fields
        )
        return ProfileResponse(user=ProfileView.from_profile(profile))
