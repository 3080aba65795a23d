"""Password setup token record.

Only used when server-side token enforcement is enabled. The raw token is
never stored, only its SHA-256 digest.
"""

from datetime import datetime

from uniflow.domain.model.common import DomainModel, utc_now
from uniflow.domain.value import SetupTokenId


class SetupTokenRecord(DomainModel):
    """Issued password setup token.

    Business rules:
    - Bound to one (lower-cased) email address
    - Valid until ``expires_at``
    - Usable exactly once; ``consumed_at`` marks use
    """

    id: SetupTokenId
    email: str
    token_hash: str
    created_at: datetime
    expires_at: datetime
    consumed_at: datetime | None = None

    def is_usable(self, now: datetime | None = None) -> bool:
        now = now or utc_now()
        return self.consumed_at is None and self.expires_at > now
