"""In-memory repository implementations for testing."""

from .profile import InMemoryProfileRepository
from .setup_token import InMemorySetupTokenRepository

__all__ = [
    "InMemoryProfileRepository",
    "InMemorySetupTokenRepository",
]
