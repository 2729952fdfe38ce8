"""
Key-value persistence port.

Stores hold opaque strings (JSON produced by the save layer). Every
failure is caught here, logged, and reported as a return value so that
gameplay can continue on in-memory state.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(ABC):
    """String blobs addressed by key."""

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """Return the stored value, or None if absent or unreadable."""

    @abstractmethod
    def save(self, key: str, value: str) -> bool:
        """Store a value. Returns True on success."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove a value. Returns True if something was removed."""

    def exists(self, key: str) -> bool:
        """Check if a value is stored under key."""
        return self.load(key) is not None


class MemoryStore(KeyValueStore):
    """In-process store (tests, sessions without persistence)."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> bool:
        if not isinstance(value, str):
            logger.error("Refusing to store non-string value under %s", key)
            return False
        self._data[key] = value
        return True

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFileStore(KeyValueStore):
    """
    One file per key under a directory.

    Usage:
        store = JsonFileStore("saves")
        store.save("math_dungeon_save", json.dumps(snapshot))
    """

    def __init__(self, save_path: str | Path = "saves"):
        self.save_path = Path(save_path)

    def _get_path(self, key: str) -> Path:
        """Get the file path for a key."""
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.save_path / f"{key}.json"

    def load(self, key: str) -> Optional[str]:
        try:
            path = self._get_path(key)
            if not path.exists():
                return None
            return path.read_text(encoding='utf-8')
        except (OSError, ValueError) as e:
            logger.error("Failed to load %s: %s", key, e)
            return None

    def save(self, key: str, value: str) -> bool:
        try:
            path = self._get_path(key)
            path.parent.mkdir(parents=True, exist_ok=True)
            # Write to a sibling file first so a crash never leaves half a save
            tmp = path.with_suffix(".tmp")
            tmp.write_text(value, encoding='utf-8')
            tmp.replace(path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save %s: %s", key, e)
            return False

    def delete(self, key: str) -> bool:
        try:
            path = self._get_path(key)
            if not path.exists():
                return False
            path.unlink()
            return True
        except (OSError, ValueError) as e:
            logger.error("Failed to delete %s: %s", key, e)
            return False
