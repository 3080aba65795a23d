"""PostgreSQL repository implementations."""

from uniflow.persistence.repository.profile import PostgresProfileRepository
from uniflow.persistence.repository.setup_token import PostgresSetupTokenRepository
from uniflow.persistence.repository.unavailable import (
    UnavailableProfileRepository,
    UnavailableSetupTokenRepository,
)

__all__ = [
    "PostgresProfileRepository",
    "PostgresSetupTokenRepository",
    "UnavailableProfileRepository",
    "UnavailableSetupTokenRepository",
]
