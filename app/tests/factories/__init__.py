"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_memory_reader,
    write_catalog_file,
)
from tests.factories.templates import (
    make_language_config,
    make_project_config,
    make_template_config,
)

__all__ = [
    "make_catalog",
    "make_language_config",
    "make_memory_reader",
    "make_project_config",
    "make_template_config",
    "write_catalog_file",
]
