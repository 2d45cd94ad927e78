"""Persistent string key/value store."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


class DataStore:
    """Stores strings under keys, in memory or in a JSON file.

    With no ``path`` the values live only as long as the object.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._values: dict[str, str] | None = None

    def _storage(self) -> dict[str, str]:
        if self._values is None:
            self._values = {}
            if self._path is not None and self._path.exists():
                loaded = json.loads(self._path.read_text(encoding="utf-8") or "{}")
                if not isinstance(loaded, dict):
                    raise ValueError(f"{self._path} does not hold a key/value object")
                self._values = {str(k): str(v) for k, v in loaded.items()}
        return self._values

    def _flush(self) -> None:
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".datastore-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(self._storage(), handle, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError(f"key must be a non-empty string, got {key!r}")

    def store(self, key: str, value: str) -> None:
        """Save ``value`` under ``key``, replacing any earlier value."""
        self._check_key(key)
        if not isinstance(value, str):
            raise TypeError(f"value must be a string, got {type(value).__name__}")
        self._storage()[key] = value
        self._flush()

    def load(self, key: str) -> str | None:
        """Return the value under ``key``, or None if there is none."""
        self._check_key(key)
        return self._storage().get(key)

    def remove(self, key: str) -> bool:
        """Delete ``key``; return whether it existed."""
        self._check_key(key)
        storage = self._storage()
        if key not in storage:
            return False
        del storage[key]
        self._flush()
        return True