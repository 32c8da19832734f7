"""Translation resource readers.

A reader fetches the raw text of a language's catalog. The loader parses
it, so any key-value store can back catalogs by implementing ResourceReader.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Tuple

from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Lookup order when several files exist for one language.
FILE_FORMATS: Tuple[Tuple[str, str], ...] = (
    (".json", "json"),
    (".yml", "yaml"),
    (".yaml", "yaml"),
)


class ResourceNotFoundError(LookupError):
    """Raised when no resource exists for a language code."""

    def __init__(self, language_code: str, location: str = ""):
        message = f"No translation resource for {language_code}"
        if location:
            message = f"{message} in {location}"
        super().__init__(message)
        self.language_code = language_code


@dataclass(frozen=True)
class RawResource:
    """Unparsed catalog content.

    Attributes:
        text: UTF-8 decoded content.
        format: "json" or "yaml".
        modified_at: Modification time of the source, when known.
    """

    text: str
    format: str = "json"
    modified_at: Optional[datetime] = None


class ResourceReader(ABC):
    """Abstract base for translation resource readers."""

    @abstractmethod
    def read(self, language_code: str) -> RawResource:
        """Read the raw catalog for a language.

        Raises:
            ResourceNotFoundError: If the language has no resource.
            OSError: If the resource exists but cannot be read.
        """
        pass

    @abstractmethod
    def modified_at(self, language_code: str) -> Optional[datetime]:
        """Modification time of the language resource, None if unknown."""
        pass


class FileResourceReader(ResourceReader):
    """Reads <language>.json (or .yml/.yaml) files from a directory.

    Attributes:
        directory: Directory holding the catalog files.
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def locate(self, language_code: str) -> Optional[Tuple[Path, str]]:
        """Find the catalog file for a language.

        Returns:
            (path, format) of the first existing file, or None.
        """
        for suffix, fmt in FILE_FORMATS:
            path = self.directory / f"{language_code}{suffix}"
            if path.is_file():
                return path, fmt
        return None

    def read(self, language_code: str) -> RawResource:
        located = self.locate(language_code)
        if located is None:
            raise ResourceNotFoundError(language_code, str(self.directory))

        path, fmt = located
        text = path.read_text(encoding="utf-8")
        logger.debug("read_translation_resource", path=str(path), format=fmt)
        return RawResource(text=text, format=fmt, modified_at=_mtime(path))

    def modified_at(self, language_code: str) -> Optional[datetime]:
        located = self.locate(language_code)
        if located is None:
            return None
        try:
            return _mtime(located[0])
        except OSError:
            return None


class InMemoryResourceReader(ResourceReader):
    """Serves catalogs from a dict of language code -> raw text.

    Useful for embedding catalogs and for tests. touch() bumps a
    language's modification time to simulate an edited file.
    """

    def __init__(self, resources: Optional[Dict[str, str]] = None, fmt: str = "json"):
        self.format = fmt
        self._resources: Dict[str, str] = dict(resources or {})
        self._modified: Dict[str, datetime] = {
            code: datetime.now(timezone.utc) for code in self._resources
        }

    def put(self, language_code: str, text: str) -> None:
        self._resources[language_code] = text
        self.touch(language_code)

    def remove(self, language_code: str) -> None:
        self._resources.pop(language_code, None)
        self._modified.pop(language_code, None)

    def touch(self, language_code: str, when: Optional[datetime] = None) -> None:
        self._modified[language_code] = when or datetime.now(timezone.utc)

    def read(self, language_code: str) -> RawResource:
        if language_code not in self._resources:
            raise ResourceNotFoundError(language_code, "memory")
        return RawResource(
            text=self._resources[language_code],
            format=self.format,
            modified_at=self._modified.get(language_code),
        )

    def modified_at(self, language_code: str) -> Optional[datetime]:
        return self._modified.get(language_code)


def _mtime(path: Path) -> datetime:
    return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
