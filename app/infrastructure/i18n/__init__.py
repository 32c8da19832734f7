"""i18n system - translation catalogs and Liquid condition resolution.

Turns translation keys into language-conditional Liquid snippets for email
templates, backed by cached translation catalogs.

Main components:
- models: TranslationEntry, TranslationCatalog, LanguageDefinition, LoadReport
- readers: ResourceReader, FileResourceReader, InMemoryResourceReader
- loader: CatalogLoader (cache-backed catalog loads)
- resolvers: LiquidConditionResolver (strict and lenient resolution)
- translator: Translator for single-language lookups with interpolation
- errors: ConfigurationError, LanguageNotFoundError, TranslationMissingError
"""

from infrastructure.i18n.errors import (
    ConfigurationError,
    I18nError,
    LanguageNotFoundError,
    TranslationMissingError,
)
from infrastructure.i18n.factory import create_catalog_loader, create_resolver
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.models import (
    LanguageDefinition,
    LoadReport,
    ReviewStatus,
    TranslationAnalysis,
    TranslationCatalog,
    TranslationEntry,
    TranslationMetadata,
)
from infrastructure.i18n.readers import (
    FileResourceReader,
    InMemoryResourceReader,
    RawResource,
    ResourceNotFoundError,
    ResourceReader,
)
from infrastructure.i18n.resolvers import (
    LiquidConditionResolver,
    build_condition,
    missing_placeholder,
)
from infrastructure.i18n.service import LocalizationService
from infrastructure.i18n.translator import Translator, interpolate

__all__ = [
    "CatalogLoader",
    "ConfigurationError",
    "FileResourceReader",
    "I18nError",
    "InMemoryResourceReader",
    "LanguageDefinition",
    "LanguageNotFoundError",
    "LiquidConditionResolver",
    "LoadReport",
    "LocalizationService",
    "RawResource",
    "ResourceNotFoundError",
    "ResourceReader",
    "ReviewStatus",
    "TranslationAnalysis",
    "TranslationCatalog",
    "TranslationEntry",
    "TranslationMetadata",
    "TranslationMissingError",
    "Translator",
    "build_condition",
    "create_catalog_loader",
    "create_resolver",
    "interpolate",
    "missing_placeholder",
]
