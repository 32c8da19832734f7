"""Unit tests for infrastructure.i18n.service module."""

import pytest

from infrastructure.i18n import LocalizationService, TranslationMissingError, Translator
from tests.factories.i18n import make_catalog

pytestmark = pytest.mark.unit


@pytest.fixture
def service(resolver):
    return LocalizationService(resolver)


class TestLocalizationService:
    """Tests for LocalizationService."""

    def test_exposes_components(self, service, resolver, loader, cache):
        """The service wraps one resolver, loader and cache."""
        assert service.resolver is resolver
        assert service.loader is loader
        assert service.cache is cache

    def test_resolve(self, service):
        """resolve() delegates to strict resolution."""
        assert "Bonjour" in service.resolve("a.b")

        with pytest.raises(TranslationMissingError):
            service.resolve("no.such.key")

    def test_resolve_from_catalogs(self, service):
        """resolve_from_catalogs() delegates to lenient resolution."""
        result = service.resolve_from_catalogs(
            "a.b", {"fr-FR": make_catalog("fr-FR")}
        )

        assert "[MISSING: a.b]" in result

    def test_translator_defaults_to_first_language(self, service):
        """The lazily created translator falls back to the default language."""
        translator = service.translator

        assert isinstance(translator, Translator)
        assert translator.fallback_language == "fr-FR"
        assert service.translator is translator

    def test_translate(self, service):
        """translate() interpolates variables."""
        assert service.translate("welcome.body", "en-US", {"name": "Ada"}) == "Hello Ada"

    def test_load_and_invalidate(self, service, cache):
        """load_catalog() caches; invalidate() drops the cache entry."""
        service.load_catalog("en-US")
        assert service.cache_get("language:en-US") is not None

        service.invalidate("en-US")

        assert service.cache_get("language:en-US") is None

    def test_cache_operations(self, service):
        """The cache_* helpers operate on the shared cache."""
        service.cache_set("k", "v", 60)
        assert service.cache_get("k") == "v"

        service.cache_delete("k")
        assert service.cache_get("k") is None

        service.cache_set("k", "v")
        service.cache_clear()
        assert service.cache_stats()["entries"] == 0
