"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .reddit import MockRedditProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockRedditProvider",
    "build_test_container",
]
