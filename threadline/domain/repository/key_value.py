"""Visitor-local key/value storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """String-keyed, string-valued storage that survives across sessions
    on the same device.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete a key. Removing an absent key is not an error."""
        pass
