"""Feature-level fixtures for template localization tests."""

import json

import pytest

from infrastructure.caching import CacheService
from infrastructure.i18n import CatalogLoader
from modules.templates import ProjectConfigLoader, ProjectConfiguration
from tests.factories.i18n import make_memory_reader
from tests.factories.templates import make_project_config


@pytest.fixture
def cache():
    return CacheService(strategy="memory")


@pytest.fixture
def project_data():
    return make_project_config()


@pytest.fixture
def project(project_data):
    return ProjectConfiguration.model_validate(project_data)


@pytest.fixture
def project_file(tmp_path, project_data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(project_data), encoding="utf-8")
    return path


@pytest.fixture
def config_loader(cache):
    return ProjectConfigLoader(cache=cache)


@pytest.fixture
def catalog_loader(cache):
    """CatalogLoader over in-memory en-US and fr-FR catalogs."""
    return CatalogLoader(make_memory_reader(), cache=cache)
