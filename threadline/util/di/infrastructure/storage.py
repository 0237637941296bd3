"""Visitor storage infrastructure providers."""

from dishka import Scope, provide

from threadline.config import Settings
from threadline.domain.repository import KeyValueStore
from threadline.persistence.keyvalue import JsonFileKeyValueStore
from threadline.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Visitor storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider keeping values in a JSON file."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_key_value_store(self, settings: Settings) -> KeyValueStore:
        """Provide file-backed key/value store."""
        return JsonFileKeyValueStore(settings.storage.path)
