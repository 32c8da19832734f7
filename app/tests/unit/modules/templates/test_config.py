"""Unit tests for modules.templates.config module."""

import json
import os

import pytest

from infrastructure.i18n import ConfigurationError
from modules.templates import ProjectConfigLoader
from tests.factories.templates import make_project_config

pytestmark = pytest.mark.unit


class TestProjectConfigLoader:
    """Tests for ProjectConfigLoader."""

    def test_load(self, config_loader, project_file):
        """load() validates the file."""
        config = config_loader.load(project_file)

        assert config.name == "Test Project"
        assert config.ordered_language_codes() == ["fr-FR", "en-US"]

    def test_caches_by_absolute_path(self, config_loader, project_file, cache):
        """The parsed configuration is cached under config:<path>."""
        config_loader.load(project_file)

        assert cache.get(f"config:{project_file.resolve()}") is not None

    def test_unchanged_file_served_from_cache(self, config_loader, project_file):
        """A file with an unchanged mtime is not parsed again."""
        first = config_loader.load(project_file)
        stat = project_file.stat()
        project_file.write_text("not json", encoding="utf-8")
        os.utime(project_file, ns=(stat.st_atime_ns, stat.st_mtime_ns))

        assert config_loader.load(project_file) == first

    def test_reloads_on_mtime_change(self, config_loader, project_file):
        """A newer file replaces the cached configuration."""
        config_loader.load(project_file)
        project_file.write_text(
            json.dumps(make_project_config(name="Renamed")), encoding="utf-8"
        )
        stat = project_file.stat()
        os.utime(project_file, (stat.st_atime, stat.st_mtime + 10))

        assert config_loader.load(project_file).name == "Renamed"

    def test_missing_file(self, config_loader, tmp_path):
        """A missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="not found"):
            config_loader.load(tmp_path / "missing.json")

    def test_invalid_json(self, config_loader, tmp_path):
        """Malformed JSON is a configuration error."""
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            config_loader.load(path)

    def test_invalid_utf8(self, config_loader, tmp_path):
        """A file that is not UTF-8 is a configuration error."""
        path = tmp_path / "config.json"
        path.write_bytes(b'{"name": "\xff"}')

        with pytest.raises(ConfigurationError, match="not valid UTF-8"):
            config_loader.load(path)

    def test_validation_failure_names_field(self, config_loader, tmp_path):
        """Validation errors mention the failing location."""
        data = make_project_config()
        del data["templates"][0]["subjectKey"]
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="templates.0.subjectKey"):
            config_loader.load(path)

    def test_validate_rejects_non_object(self, config_loader):
        """The top level must be an object."""
        with pytest.raises(ConfigurationError, match="must be an object"):
            config_loader.validate(["en-US"])

    def test_save_then_load(self, config_loader, project, tmp_path):
        """save() writes a file load() accepts."""
        path = tmp_path / "nested" / "config.json"

        config_loader.save(path, project)

        assert json.loads(path.read_text(encoding="utf-8"))["templates"][0]["from"] == (
            "noreply@example.com"
        )
        assert config_loader.load(path) == project

    def test_invalidate_one(self, config_loader, project_file, cache):
        """invalidate(path) drops that configuration."""
        config_loader.load(project_file)

        config_loader.invalidate(project_file)

        assert cache.get(ProjectConfigLoader.cache_key(project_file)) is None

    def test_invalidate_all_keeps_other_entries(self, config_loader, project_file, cache):
        """invalidate() drops loaded configurations only."""
        cache.set("language:en-US", {"kept": True})
        config_loader.load(project_file)

        config_loader.invalidate()

        assert cache.get(ProjectConfigLoader.cache_key(project_file)) is None
        assert cache.get("language:en-US") == {"kept": True}
