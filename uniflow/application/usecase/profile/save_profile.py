"""Save profile use case."""

from pydantic import BaseModel

from uniflow.application.usecase.base import BaseUseCase
from uniflow.domain.service import ProfileService
from uniflow.domain.value import AccountId, ProfileFields

from .common import ProfileResponse, ProfileView


class SaveProfileRequest(BaseModel):
    """Save profile request."""

    account_id: str  # From authenticated principal
    fields: ProfileFields


class SaveProfileUseCase(BaseUseCase):
    """Use case for creating or merging the caller's profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize save profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: SaveProfileRequest) -> ProfileResponse:
        """Execute profile upsert.

        Returns:
            Stored profile, including ``createdAt`` from the first save

        Raises:
            ServiceUnavailableError: If no database is configured
            StorageError: If the store fails
        """
        profile = await self.profile_service.save(
            AccountId(request.account_id), request.fields
        )
        return ProfileResponse(user=ProfileView.from_profile(profile))
