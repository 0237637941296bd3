"""Mock visitor storage providers for testing."""

from dishka import Scope, provide

from threadline.domain.repository import KeyValueStore
from threadline.persistence.keyvalue import InMemoryKeyValueStore
from threadline.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider keeping values in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_key_value_store(self) -> KeyValueStore:
        """Provide in-memory key/value store."""
        return InMemoryKeyValueStore()
