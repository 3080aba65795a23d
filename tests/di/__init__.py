"""Mock providers for testing."""

from .firebase import MockFirebaseProvider
from .persistence import MockPersistenceProvider
from .sendgrid import MockSendGridProvider
from .container import build_test_container

__all__ = [
    "MockFirebaseProvider",
    "MockPersistenceProvider",
    "MockSendGridProvider",
    "build_test_container",
]
