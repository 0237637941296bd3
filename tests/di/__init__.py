"""Mock providers for testing."""

from .backend import MockBackendProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockBackendProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
