import pytest
from freezegun import freeze_time

from infrastructure.services import providers


@pytest.fixture(autouse=True)
def reset_providers():
    """Drop application-scoped singletons between tests.

    Stops the sweeper thread of any cache service a test created through
    the providers so no background thread outlives its test.
    """
    yield
    if providers.get_cache_service.cache_info().currsize:
        providers.get_cache_service().stop_sweeper(timeout=1)
    providers.get_localization_service.cache_clear()
    providers.get_catalog_loader.cache_clear()
    providers.get_cache_service.cache_clear()
    providers.get_settings.cache_clear()


@pytest.fixture
def frozen_clock():
    """Freeze time at a fixed instant; call .tick() to advance it."""
    with freeze_time("2024-01-01 00:00:00") as frozen:
        yield frozen


@pytest.fixture
def clean_env(monkeypatch):
    """Remove localizer environment variables so defaults apply."""
    for name in (
        "PREFIX",
        "LOG_LEVEL",
        "CACHE_STRATEGY",
        "CACHE_TTL_SECONDS",
        "CACHE_MAX_SIZE_MB",
        "CACHE_DIRECTORY",
        "CACHE_SWEEP_INTERVAL_SECONDS",
        "I18N_LANGUAGES_DIR",
        "I18N_LANGUAGES",
        "I18N_CATALOG_TTL_SECONDS",
        "I18N_LANGUAGE_VARIABLE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
