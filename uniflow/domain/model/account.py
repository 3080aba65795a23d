"""Identity provider account and request principal.

Accounts are owned entirely by the identity provider. This service only
reads them and, through the linking workflow, adds a password credential.
"""

from typing import Any

from pydantic import Field

from uniflow.domain.model.common import DomainModel
from uniflow.domain.value import PASSWORD_PROVIDER, AccountId


class Account(DomainModel):
    """Identity provider account.

    ``providers`` lists linked sign-in methods in provider order, e.g.
    ``("google.com",)`` for a Google-only account or
    ``("google.com", "password")`` once a password has been linked.
    """

    id: AccountId
    email: str | None = None
    display_name: str | None = None
    providers: tuple[str, ...] = ()
    disabled: bool = False

    @property
    def has_password(self) -> bool:
        return PASSWORD_PROVIDER in self.providers


class Principal(DomainModel):
    """Caller identity decoded from a verified bearer token."""

    account_id: AccountId
    email: str | None = None
    claims: dict[str, Any] = Field(default_factory=dict)
