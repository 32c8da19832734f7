"""Disk cache store persisting one JSON file per key."""

import hashlib
import json
import re
import shutil
from pathlib import Path
from typing import Any, Optional

from infrastructure.caching.errors import CacheIOError
from infrastructure.caching.models import CacheEntry, Clock, now_ms
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_UNSAFE_KEY_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def sanitize_key(key: str) -> str:
    """Map a cache key to a filesystem-safe file stem.

    Example:
        >>> sanitize_key("language:fr-FR")
        'language_fr-FR'
    """
    return _UNSAFE_KEY_CHARS.sub("_", key)


class DiskCacheStore:
    """Stores CacheEntry objects as UTF-8 JSON files under a directory.

    Expired files are left in place; get() reports them as misses and they
    are replaced by the next set() or removed by clear().

    All I/O failures surface as CacheIOError so the caller can decide
    whether to absorb them.

    Attributes:
        directory: Directory holding the entry files.
        clock: Callable returning epoch seconds; time.time when None.
    """

    def __init__(self, directory: Path | str, clock: Optional[Clock] = None):
        self.directory = Path(directory)
        self.clock = clock

    def ensure_directory(self) -> None:
        """Create the cache directory if needed.

        Raises:
            CacheIOError: If the directory cannot be created.
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheIOError(
                f"Failed to create cache directory {self.directory}: {e}",
                path=str(self.directory),
            ) from e

    def path_for(self, key: str) -> Path:
        """File holding the entry for key.

        The stem is the sanitized key plus a short digest of the raw key, so
        keys that sanitize to the same text still get distinct files.
        """
        digest = hashlib.sha256(key.encode()).hexdigest()[:16]
        return self.directory / f"{sanitize_key(key)}-{digest}.json"

    def get_entry(self, key: str) -> Optional[CacheEntry]:
        """Read the entry stored for key, expired or not.

        Returns:
            The entry, or None if no file exists.

        Raises:
            CacheIOError: If the file cannot be read or decoded.
        """
        path = self.path_for(key)
        if not path.exists():
            return None

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
            return CacheEntry.from_dict(payload)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise CacheIOError(
                f"Failed to read disk cache entry {path}: {e}",
                key=key,
                path=str(path),
            ) from e

    def get(self, key: str) -> Optional[Any]:
        """Return cached data, or None when absent or expired."""
        entry = self.get_entry(key)
        if entry is None or entry.is_expired(now_ms(self.clock)):
            return None
        return entry.data

    def set_entry(self, key: str, entry: CacheEntry) -> None:
        """Write an entry to disk, replacing any previous file.

        Raises:
            CacheIOError: If the entry cannot be serialized or written.
        """
        path = self.path_for(key)
        try:
            content = json.dumps(entry.to_dict())
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise CacheIOError(
                f"Failed to write disk cache entry {path}: {e}",
                key=key,
                path=str(path),
            ) from e

    def delete(self, key: str) -> None:
        """Remove the file for key if present.

        Raises:
            CacheIOError: If the file exists but cannot be removed.
        """
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise CacheIOError(
                f"Failed to delete disk cache entry {path}: {e}",
                key=key,
                path=str(path),
            ) from e

    def clear(self) -> None:
        """Empty the cache directory, keeping the directory itself.

        Raises:
            CacheIOError: If any child cannot be removed.
        """
        if not self.directory.exists():
            return

        try:
            for child in self.directory.iterdir():
                if child.is_dir():
                    shutil.rmtree(child)
                else:
                    child.unlink()
        except OSError as e:
            raise CacheIOError(
                f"Failed to clear disk cache {self.directory}: {e}",
                path=str(self.directory),
            ) from e

    def count(self) -> int:
        """Number of entry files currently on disk."""
        if not self.directory.exists():
            return 0
        return sum(1 for _ in self.directory.glob("*.json"))
