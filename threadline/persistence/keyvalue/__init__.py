"""Key/value store implementations."""

from .inmemory import InMemoryKeyValueStore
from .json_file import JsonFileKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
