"""Identity provider port."""

from uniflow.domain.model import Account, Principal
from uniflow.domain.value import AccountId, EmailAddress


class IdentityProviderError(Exception):
    """Identity provider call failed."""

    pass


class TokenVerificationError(IdentityProviderError):
    """Bearer token is malformed, expired or not signed by the provider."""

    pass


class IdentityGateway:
    """Generic identity provider interface.

    Implementations must raise ``IdentityProviderError`` subclasses only.
    """

    @property
    def is_configured(self) -> bool:
        """Whether provider credentials are present."""
        raise NotImplementedError

    async def verify_token(self, token: str) -> Principal:
        """Verify a bearer token.

        Returns:
            Principal whose account id is the token subject

        Raises:
            TokenVerificationError: If the token is not valid
        """
        raise NotImplementedError

    async def get_account_by_email(self, email: EmailAddress) -> Account | None:
        """Look up an account by normalized email.

        Returns:
            Account if found, None otherwise
        """
        raise NotImplementedError

    async def list_providers(self, account_id: AccountId) -> tuple[str, ...]:
        """Return the provider ids currently linked to an account."""
        raise NotImplementedError

    async def set_password(self, account_id: AccountId, password: str) -> None:
        """Attach a password credential to an account.

        Raises:
            IdentityProviderError: If the provider rejects the change
        """
        raise NotImplementedError
