"""Domain models."""

from uniflow.domain.model.account import Account, Principal
from uniflow.domain.model.profile import UserProfile
from uniflow.domain.model.setup_token import SetupTokenRecord

__all__ = ["Account", "Principal", "SetupTokenRecord", "UserProfile"]
