"""Repository interfaces for the UniFlow domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from uniflow.domain.repository.profile import ProfileRepository
from uniflow.domain.repository.setup_token import SetupTokenRepository

__all__ = ["ProfileRepository", "SetupTokenRepository"]
