"""Feature-level fixtures for i18n system tests.

Provides catalogs on disk and in memory plus loaders and resolvers wired
to a memory cache.
"""

import pytest

from infrastructure.caching import CacheService
from infrastructure.i18n import CatalogLoader, FileResourceReader, LiquidConditionResolver
from tests.factories.i18n import DEFAULT_MESSAGES, make_memory_reader, write_catalog_file


@pytest.fixture
def languages_dir(tmp_path):
    """Directory with en-US.json and fr-FR.json catalogs."""
    directory = tmp_path / "languages"
    directory.mkdir()
    for code, messages in DEFAULT_MESSAGES.items():
        write_catalog_file(directory, code, messages)
    return directory


@pytest.fixture
def cache():
    return CacheService(strategy="memory", ttl_seconds=3600)


@pytest.fixture
def memory_reader():
    return make_memory_reader()


@pytest.fixture
def loader(memory_reader, cache):
    """CatalogLoader over in-memory en-US and fr-FR catalogs."""
    return CatalogLoader(memory_reader, cache=cache)


@pytest.fixture
def file_loader(languages_dir, cache):
    return CatalogLoader(FileResourceReader(languages_dir), cache=cache)


@pytest.fixture
def resolver(loader):
    """Resolver with French as the default language."""
    return LiquidConditionResolver(loader, languages=["fr-FR", "en-US"])
