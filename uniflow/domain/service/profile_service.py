"""User profile domain service."""

import logfire

from uniflow.domain.error import ProfileNotFoundError, RepositoryError, StorageError
from uniflow.domain.model import UserProfile
from uniflow.domain.model.common import utc_now
from uniflow.domain.repository import ProfileRepository
from uniflow.domain.value import AccountId, ProfileFields

from .base import Service


class ProfileService(Service):
    """Domain service for profile documents.

    Callers are expected to pass the authenticated principal's account id,
    so every operation only ever touches the caller's own document.
    """

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def save(self, account_id: AccountId, fields: ProfileFields) -> UserProfile:
        """Create the profile or merge fields into it.

        Args:
            account_id: Owner account id
            fields: Fields to write; unset fields are left untouched

        Returns:
            Stored profile

        Raises:
            StorageError: If the store fails
        """
        with logfire.span("profile_service.save", account_id=account_id):
            try:
                profile = await self.profile_repository.upsert(
                    account_id, fields.changes(), utc_now()
                )
            except RepositoryError as e:
                logfire.error("Profile save failed", account_id=account_id, error=str(e))
                raise StorageError("Failed to save user", details=str(e)) from e

            logfire.info(
                "Profile saved",
                account_id=account_id,
                fields=sorted(fields.model_fields_set),
            )
            return profile

    async def get(self, account_id: AccountId) -> UserProfile:
        """Get a profile by account id.

        Raises:
            ProfileNotFoundError: If no profile exists
            StorageError: If the store fails
        """
        with logfire.span("profile_service.get", account_id=account_id):
            try:
                profile = await self.profile_repository.find_by_id(account_id)
            except RepositoryError as e:
                logfire.error("Profile fetch failed", account_id=account_id, error=str(e))
                raise StorageError("Failed to fetch user", details=str(e)) from e

            if profile is None:
                logfire.warn("Profile not found", account_id=account_id)
                raise ProfileNotFoundError(account_id)
            return profile

    async def update(self, account_id: AccountId, fields: ProfileFields) -> UserProfile:
        """Merge fields into an existing profile.

        Raises:
            ProfileNotFoundError: If no profile exists; nothing is written
            StorageError: If the store fails
        """
        with logfire.span("profile_service.update", account_id=account_id):
            try:
                profile = await self.profile_repository.update(
                    account_id, fields.changes(), utc_now()
                )
            except RepositoryError as e:
                logfire.error(
                    "Profile update failed", account_id=account_id, error=str(e)
                )
                raise StorageError("Failed to update user", details=str(e)) from e

            if profile is None:
                logfire.warn("Profile not found for update", account_id=account_id)
                raise ProfileNotFoundError(account_id)

            logfire.info(
                "Profile updated",
                account_id=account_id,
                fields=sorted(fields.model_fields_set),
            )
            return profile

    async def is_available(self) -> bool:
        """Whether the profile store answers a trivial query."""
        try:
            return await self.profile_repository.ping()
        except RepositoryError as e:
            logfire.warn("Profile store ping failed", error=str(e))
            return False
