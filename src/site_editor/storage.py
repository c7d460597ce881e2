"""File-backed key-value store for persisted documents.

Each key is a single slot holding one text value, stored as
``<base_path>/<key>.json``. Writing a key overwrites its slot.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class StorageError(OSError):
    """Reading or writing a storage slot failed."""

    pass


class LocalStore:
    """Key-value store with one UTF-8 file per key."""

    def __init__(self, base_path: Union[str, Path]) -> None:
        self.base = Path(base_path)

    def _path_for(self, key: str) -> Path:
        if not KEY_PATTERN.match(key) or key in (".", ".."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.base / f"{key}.json"

    def exists(self, key: str) -> bool:
        return self._path_for(key).is_file()

    def get(self, key: str) -> Optional[str]:
        """Get the value stored under ``key``, or None if the slot is empty."""
        path = self._path_for(key)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        path = self._path_for(key)
        try:
            self.base.mkdir(parents=True, exist_ok=True)
            path.write_text(value, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}") from e
        logger.info(f"Saved {len(value)} characters to {path}")

    def delete(self, key: str) -> bool:
        """Empty a slot. Returns True if there was a value to remove."""
        path = self._path_for(key)
        if not path.is_file():
            return False
        path.unlink()
        logger.info(f"Removed {path}")
        return True
