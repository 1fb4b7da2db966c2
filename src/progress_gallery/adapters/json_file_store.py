"""File-backed key-value store."""

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for a durable string key-value slot."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value for a key, replacing any previous value."""


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Keeps string values in a single JSON object on disk."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        entries = self._read()
        value = entries.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store a value and atomically replace the file."""
        try:
            entries = self._read()
        except ValueError:
            entries = {}
        entries[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(entries, handle, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        raw = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Expected a JSON object in {self.path}")
        return raw
