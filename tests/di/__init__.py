"""Mock providers for testing."""

from .container import build_test_container
from .persistence import MockPersistenceProvider
from .profiles import MockProfilesProvider

__all__ = [
    "MockPersistenceProvider",
    "MockProfilesProvider",
    "build_test_container",
]
