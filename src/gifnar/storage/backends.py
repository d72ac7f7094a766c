"""Key-value byte stores backing the entry slot."""

import contextlib
import logging
from pathlib import Path
from typing import Protocol

from gifnar.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """A persistent byte store addressed by string keys."""

    def get_item(self, key: str) -> bytes | None:
        """Return the value for key, or None if absent."""
        ...

    def set_item(self, key: str, value: bytes) -> None:
        """Overwrite the value for key."""
        ...


class FileKeyValueStore:
    """Stores each key as one file under a root directory."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise StorageUnavailableError(f"Invalid storage key: {key!r}")
        return self.root / key

    def get_item(self, key: str) -> bytes | None:
        path = self._path(key)
        try:
            if not path.exists():
                return None
            return path.read_bytes()
        except OSError as e:
            raise StorageUnavailableError(f"Cannot read {path}: {e}") from e

    def set_item(self, key: str, value: bytes) -> None:
        """Write value for key, replacing the previous file atomically."""
        path = self._path(key)
        # Write to temp file first for atomic operation
        temp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_bytes(value)
            temp_path.replace(path)
        except OSError as e:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise StorageUnavailableError(f"Cannot write {path}: {e}") from e
        logger.debug("Wrote %d bytes to %s", len(value), path)


class MemoryKeyValueStore:
    """Dict-backed store for scripts and tests.

    Setting ``available`` to False makes every access raise
    StorageUnavailableError, like a disabled or full device store.
    """

    def __init__(self, items: dict[str, bytes] | None = None) -> None:
        self.items: dict[str, bytes] = dict(items or {})
        self.available = True

    def _check(self) -> None:
        if not self.available:
            raise StorageUnavailableError("Memory store is unavailable")

    def get_item(self, key: str) -> bytes | None:
        self._check()
        return self.items.get(key)

    def set_item(self, key: str, value: bytes) -> None:
        self._check()
        self.items[key] = value
