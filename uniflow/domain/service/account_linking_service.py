"""Account linking domain service.

Adds a password credential to an account that so far only signs in with a
federated provider (e.g. Google). The transition is one-way: once an
account has a password it can never be linked again through this service.
"""

import logfire

from uniflow.domain.error import (
    AccountNotFoundError,
    AlreadyLinkedError,
    InvalidSetupTokenError,
    LinkingError,
    ServiceUnavailableError,
)
from uniflow.domain.value import PASSWORD_PROVIDER, EmailAddress, SetupToken
from uniflow.util.locks import KeyedLock

from .base import Service, require_fields
from .identity_gateway import IdentityGateway, IdentityProviderError
from .setup_token_service import SetupTokenService


class AccountLinkingService(Service):
    """Runs the password setup transition.

    Gates are evaluated in order, cheapest first, and short-circuit:

    1. email, password and token are present
    2. the identity provider is configured
    3. an account exists for the lower-cased email
    4. the account has no password yet (re-read under the account lock)
    5. the setup token is valid (only when token enforcement is on)

    With token enforcement on, the token is checked before the provider
    update and consumed only after it succeeds, so a failed update leaves
    the token usable for a retry.

    Callers without token enforcement must validate the setup token
    themselves before calling.
    """

    def __init__(
        self,
        identity_gateway: IdentityGateway,
        setup_token_service: SetupTokenService,
        account_locks: KeyedLock,
    ) -> None:
        """Initialize account linking service.

        Args:
            identity_gateway: Identity provider
            setup_token_service: Setup token ledger
            account_locks: Process-wide per-account locks
        """
        self.identity_gateway = identity_gateway
        self.setup_token_service = setup_token_service
        self.account_locks = account_locks

    async def link_password(
        self, email: str | None, password: str | None, token: str | None
    ) -> None:
        """Set a password on the account registered under ``email``.

        Args:
            email: Account email, any case
            password: New password, passed to the provider unchanged
            token: Password setup token from the setup link

        Raises:
            MissingFieldsError: If any argument is missing or empty
            ServiceUnavailableError: If the identity provider is not configured
            AccountNotFoundError: If no account uses the email
            AlreadyLinkedError: If the account already has a password
            InvalidSetupTokenError: If token enforcement rejects the token
            LinkingError: If the provider fails the lookup or the update
        """
        require_fields(email=email, password=password, token=token)

        if not self.identity_gateway.is_configured:
            logfire.error("Identity provider not configured")
            raise ServiceUnavailableError(
                "identity_provider", "Identity provider not configured"
            )

        address = EmailAddress(email)
        setup_token = SetupToken(token)

        with logfire.span(
            "account_linking_service.link_password", email=address.root
        ):
            try:
                account = await self.identity_gateway.get_account_by_email(address)
            except IdentityProviderError as e:
                logfire.error("Account lookup failed", error=str(e))
                raise LinkingError("Failed to set password", details=str(e)) from e

            if account is None:
                logfire.warn("No account for email", email=address.root)
                raise AccountNotFoundError(address.root)

            async with self.account_locks.hold(account.id):
                try:
                    # Re-read under the lock; a concurrent request may have
                    # linked a password since the lookup above.
                    providers = await self.identity_gateway.list_providers(account.id)
                except IdentityProviderError as e:
                    logfire.error("Provider listing failed", error=str(e))
                    raise LinkingError(
                        "Failed to set password", details=str(e)
                    ) from e

                if PASSWORD_PROVIDER in providers:
                    logfire.warn(
                        "Account already has a password",
                        account_id=account.id,
                        providers=list(providers),
                    )
                    raise AlreadyLinkedError(account.id)

                await self.setup_token_service.verify(address, setup_token)

                try:
                    await self.identity_gateway.set_password(account.id, password)
                except IdentityProviderError as e:
                    logfire.error(
                        "Password linking failed", account_id=account.id, error=str(e)
                    )
                    raise LinkingError("Failed to set password", details=str(e)) from e

                try:
                    await self.setup_token_service.consume(address, setup_token)
                except InvalidSetupTokenError:
                    # Consumed by another process between verify and here.
                    logfire.warn(
                        "Setup token consumed concurrently", account_id=account.id
                    )

            logfire.info("Password linked", account_id=account.id)
