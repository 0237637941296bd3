"""In-memory key/value store for testing."""

from typing import Optional

from threadline.domain.repository.key_value import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory implementation of KeyValueStore for testing."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        """Return the stored value."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        self._values[key] = value

    def remove(self, key: str) -> None:
        """Delete a key."""
        self._values.pop(key, None)

    # Quoted, since `set` in this class body is the method above
    def keys(self) -> "set[str]":
        """Keys currently stored."""
        return set(self._values)
