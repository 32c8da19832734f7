"""Translation models for i18n system.

Defines core data structures for managing translations and languages.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

LANGUAGE_NAMES = {
    "en-US": "English (United States)",
    "fr-FR": "French (France)",
    "es-ES": "Spanish (Spain)",
    "de-DE": "German (Germany)",
    "it-IT": "Italian (Italy)",
    "pt-BR": "Portuguese (Brazil)",
    "ja-JP": "Japanese (Japan)",
    "ko-KR": "Korean (South Korea)",
    "zh-CN": "Chinese (Simplified)",
    "ru-RU": "Russian (Russia)",
}

RTL_LANGUAGES = {"ar", "fa", "he", "ur"}


class ReviewStatus(str, Enum):
    """Editorial state of a catalog."""

    DRAFT = "draft"
    REVIEWED = "reviewed"
    APPROVED = "approved"


@dataclass(frozen=True)
class LanguageDefinition:
    """Describes a language code.

    Language codes are opaque identifiers (e.g., "en-US", "fr-FR"); only
    equality is relied on.

    Attributes:
        code: Language code.
        name: Human readable name.
        direction: Text direction, "ltr" or "rtl".
    """

    code: str
    name: str
    direction: str = "ltr"

    @classmethod
    def from_code(cls, code: str) -> "LanguageDefinition":
        """Build a definition from a code using the well-known names table.

        Unknown codes use the upper-cased code as name.
        """
        primary = code.split("-")[0].lower()
        return cls(
            code=code,
            name=LANGUAGE_NAMES.get(code, code.upper()),
            direction="rtl" if primary in RTL_LANGUAGES else "ltr",
        )


@dataclass(frozen=True)
class TranslationEntry:
    """A single translated string.

    Frozen: entries are created while parsing a catalog and never change.

    Attributes:
        key: Flat translation key (e.g., "welcome.subject").
        value: Translated text.
        description: Optional note for translators.
    """

    key: str
    value: str
    description: Optional[str] = None


@dataclass
class TranslationMetadata:
    """Catalog metadata.

    Attributes:
        version: Catalog format version.
        last_modified: Modification time of the backing resource.
        completeness: Percentage (0-100) of entries with a non-blank value.
        review_status: Editorial state.
    """

    version: str = "1.0.0"
    last_modified: Optional[datetime] = None
    completeness: int = 0
    review_status: ReviewStatus = ReviewStatus.DRAFT


def calculate_completeness(entries: Iterable[TranslationEntry]) -> int:
    """Percentage of entries whose trimmed value is non-empty.

    Returns:
        Rounded percentage, 0 for an empty catalog.
    """
    entries = list(entries)
    if not entries:
        return 0
    completed = sum(1 for entry in entries if entry.value.strip())
    return round(completed / len(entries) * 100)


@dataclass
class TranslationCatalog:
    """Container for translations in a specific language.

    Attributes:
        language: LanguageDefinition this catalog is for.
        entries: Mapping of key to TranslationEntry.
        metadata: Catalog metadata.
    """

    language: LanguageDefinition
    entries: Dict[str, TranslationEntry] = field(default_factory=dict)
    metadata: TranslationMetadata = field(default_factory=TranslationMetadata)

    @property
    def code(self) -> str:
        return self.language.code

    @classmethod
    def from_messages(
        cls,
        language_code: str,
        messages: Dict[str, str],
        last_modified: Optional[datetime] = None,
    ) -> "TranslationCatalog":
        """Wrap a flat key -> string mapping as a catalog.

        Args:
            language_code: Code of the catalog language.
            messages: Flat mapping of translation key to text.
            last_modified: Modification time of the source.

        Returns:
            TranslationCatalog with computed completeness.
        """
        entries = {
            key: TranslationEntry(
                key=key, value=value, description=f"Translation for {key}"
            )
            for key, value in messages.items()
        }
        return cls(
            language=LanguageDefinition.from_code(language_code),
            entries=entries,
            metadata=TranslationMetadata(
                last_modified=last_modified,
                completeness=calculate_completeness(entries.values()),
            ),
        )

    def get_value(self, key: str) -> Optional[str]:
        """Retrieve translated text by key.

        Returns:
            Translated string, or None if not found.
        """
        entry = self.entries.get(key)
        return entry.value if entry else None

    def has_key(self, key: str) -> bool:
        return key in self.entries

    def keys(self) -> List[str]:
        return list(self.entries.keys())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dict (used by the disk cache)."""
        last_modified = self.metadata.last_modified
        return {
            "language": {
                "code": self.language.code,
                "name": self.language.name,
                "direction": self.language.direction,
            },
            "entries": {
                key: {"value": entry.value, "description": entry.description}
                for key, entry in self.entries.items()
            },
            "metadata": {
                "version": self.metadata.version,
                "last_modified": last_modified.isoformat() if last_modified else None,
                "completeness": self.metadata.completeness,
                "review_status": self.metadata.review_status.value,
            },
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "TranslationCatalog":
        """Rebuild a catalog from to_dict() output.

        Raises:
            KeyError: If a required field is absent.
            ValueError: If a field has an invalid value.
        """
        language = payload["language"]
        metadata = payload.get("metadata", {})
        last_modified = metadata.get("last_modified")
        return cls(
            language=LanguageDefinition(
                code=language["code"],
                name=language.get("name", language["code"].upper()),
                direction=language.get("direction", "ltr"),
            ),
            entries={
                key: TranslationEntry(
                    key=key,
                    value=item["value"],
                    description=item.get("description"),
                )
                for key, item in payload.get("entries", {}).items()
            },
            metadata=TranslationMetadata(
                version=metadata.get("version", "1.0.0"),
                last_modified=(
                    datetime.fromisoformat(last_modified) if last_modified else None
                ),
                completeness=int(metadata.get("completeness", 0)),
                review_status=ReviewStatus(metadata.get("review_status", "draft")),
            ),
        )


@dataclass
class LoadReport:
    """Outcome of loading several languages at once.

    Attributes:
        catalogs: Loaded catalogs keyed by language code, in request order.
        failures: Error message per language code that failed to load.
    """

    catalogs: Dict[str, TranslationCatalog] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return not self.failures


@dataclass
class TranslationAnalysis:
    """Coverage report across several catalogs.

    Attributes:
        total_keys: Number of distinct keys across all catalogs.
        languages_count: Number of catalogs analysed.
        missing: Sorted missing keys per language (only languages with gaps).
    """

    total_keys: int = 0
    languages_count: int = 0
    missing: Dict[str, List[str]] = field(default_factory=dict)
