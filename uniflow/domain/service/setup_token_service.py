"""Password setup token domain service."""

from datetime import timedelta
from uuid import uuid4

import logfire

from uniflow.config import PasswordSetupSettings
from uniflow.domain.error import InvalidSetupTokenError, RepositoryError, StorageError
from uniflow.domain.model import SetupTokenRecord
from uniflow.domain.model.common import utc_now
from uniflow.domain.repository import SetupTokenRepository
from uniflow.domain.value import EmailAddress, SetupToken, SetupTokenId

from .base import Service


class SetupTokenService(Service):
    """Server-side ledger of password setup tokens.

    Inactive unless ``enforce_tokens`` is set. While inactive, nothing is
    stored and every token passes.
    """

    def __init__(
        self,
        setup_token_repository: SetupTokenRepository,
        settings: PasswordSetupSettings,
    ) -> None:
        """Initialize setup token service.

        Args:
            setup_token_repository: Token record repository
            settings: Password setup settings
        """
        self.setup_token_repository = setup_token_repository
        self.settings = settings

    @property
    def enforced(self) -> bool:
        return self.settings.enforce_tokens

    async def record(self, email: EmailAddress, token: SetupToken) -> None:
        """Record a token that is about to be emailed.

        Recording the same token for the same address again is a no-op, so
        the setup email can be re-sent with an unchanged link.

        Args:
            email: Address the setup link is sent to
            token: Raw token embedded in the setup link

        Raises:
            InvalidSetupTokenError: If the token was issued for another
                address, or is already used or expired
            StorageError: If the ledger store fails
        """
        if not self.enforced:
            return

        with logfire.span("setup_token_service.record", token=token.redacted()):
            now = utc_now()
            record = SetupTokenRecord(
                id=SetupTokenId(uuid4()),
                email=email.root,
                token_hash=token.digest(),
                created_at=now,
                expires_at=now + timedelta(hours=self.settings.token_ttl_hours),
            )
            try:
                saved = await self.setup_token_repository.save(record)
                existing = (
                    None
                    if saved
                    else await self.setup_token_repository.find_by_hash(
                        record.token_hash
                    )
                )
            except RepositoryError as e:
                logfire.error("Setup token record failed", error=str(e))
                raise StorageError("Failed to record setup token", details=str(e)) from e

            if saved is None:
                reusable = (
                    existing is not None
                    and existing.email == email.root
                    and existing.is_usable(now)
                )
                if not reusable:
                    logfire.warn("Setup token reuse rejected", token=token.redacted())
                    raise InvalidSetupTokenError()
                logfire.info("Setup token already recorded", token_id=str(existing.id))
                return

            logfire.info(
                "Setup token recorded",
                token_id=str(record.id),
                expires_at=record.expires_at.isoformat(),
            )

    async def check(self, email: EmailAddress, token: SetupToken) -> bool:
        """Non-consuming validity check.

        Raises:
            StorageError: If the ledger store fails
        """
        if not self.enforced:
            return True

        try:
            record = await self.setup_token_repository.find_by_hash(token.digest())
        except RepositoryError as e:
            logfire.error("Setup token lookup failed", error=str(e))
            raise StorageError("Failed to verify setup token", details=str(e)) from e
        return bool(record and record.email == email.root and record.is_usable())

    async def verify(self, email: EmailAddress, token: SetupToken) -> None:
        """Like ``check``, but raises when the token is not usable.

        Raises:
            InvalidSetupTokenError: If the token is unknown, bound to another
                email, expired or already used
            StorageError: If the ledger store fails
        """
        if not await self.check(email, token):
            logfire.warn("Setup token rejected", token=token.redacted())
            raise InvalidSetupTokenError()

    async def consume(self, email: EmailAddress, token: SetupToken) -> None:
        """Validate and consume a token in one atomic step.

        Raises:
            InvalidSetupTokenError: If the token is unknown, bound to another
                email, expired or already used
            StorageError: If the ledger store fails
        """
        if not self.enforced:
            return

        with logfire.span("setup_token_service.consume", token=token.redacted()):
            try:
                consumed = await self.setup_token_repository.consume(
                    token.digest(), email.root, utc_now()
                )
            except RepositoryError as e:
                logfire.error("Setup token consume failed", error=str(e))
                raise StorageError("Failed to verify setup token", details=str(e)) from e

            if consumed is None:
                logfire.warn("Setup token rejected", token=token.redacted())
                raise InvalidSetupTokenError()
            logfire.info("Setup token consumed", token_id=str(consumed.id))
