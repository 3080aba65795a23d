"""Domain value objects for UniFlow."""

from uniflow.domain.value.identifiers import AccountId, SetupTokenId
from uniflow.domain.value.types import (
    PASSWORD_PROVIDER,
    EmailAddress,
    EmailMessage,
    ProfileFields,
    SetupToken,
)

__all__ = [
    # Identifiers
    "AccountId",
    "SetupTokenId",
    # Types
    "PASSWORD_PROVIDER",
    "EmailAddress",
    "EmailMessage",
    "ProfileFields",
    "SetupToken",
]
