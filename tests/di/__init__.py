"""Mock providers for testing."""

from .chat import MockChatProvider
from .mail import MockEmailProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockChatProvider",
    "MockEmailProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
