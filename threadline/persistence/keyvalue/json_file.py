"""JSON file backed key/value store.

Keeps the visitor's values in a single JSON object on disk so they survive
across sessions on the same machine.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

import logfire

from threadline.domain.repository.key_value import KeyValueStore
from threadline.util.error import StorageError


class JsonFileKeyValueStore(KeyValueStore):
    """KeyValueStore persisted as a JSON object.

    The file is re-read on every access and rewritten atomically on every
    change, so several processes on the same device see each other's writes.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize store.

        Args:
            path: Location of the JSON file (``~`` is expanded)
        """
        self.path = Path(path).expanduser()

    def get(self, key: str) -> Optional[str]:
        """Return the stored value."""
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        values = self._read()
        values[key] = value
        self._write(values)

    def remove(self, key: str) -> None:
        """Delete a key."""
        values = self._read()
        if key in values:
            del values[key]
            self._write(values)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logfire.error(
                "Failed to read visitor storage", path=str(self.path), error=str(e)
            )
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Expected a JSON object in {self.path}")
        # Values are strings by contract; drop anything else a user hand-edited in
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, values: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(values, tmp, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logfire.error(
                "Failed to write visitor storage", path=str(self.path), error=str(e)
            )
            raise StorageError(f"Cannot write {self.path}: {e}") from e
