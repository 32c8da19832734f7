"""Unit tests for infrastructure.i18n.readers module."""

from datetime import datetime, timezone

import pytest

from infrastructure.i18n.readers import (
    FileResourceReader,
    InMemoryResourceReader,
    ResourceNotFoundError,
)

pytestmark = pytest.mark.unit


class TestFileResourceReader:
    """Tests for FileResourceReader."""

    def test_reads_json_catalog(self, languages_dir):
        """read() returns the file text, format and mtime."""
        resource = FileResourceReader(languages_dir).read("fr-FR")

        assert '"a.b": "Bonjour"' in resource.text
        assert resource.format == "json"
        assert resource.modified_at is not None
        assert resource.modified_at.tzinfo is timezone.utc

    def test_reads_yaml_catalog(self, tmp_path):
        """.yml files are read with the yaml format."""
        (tmp_path / "de-DE.yml").write_text("a.b: Hallo\n", encoding="utf-8")

        resource = FileResourceReader(tmp_path).read("de-DE")

        assert resource.format == "yaml"

    def test_json_takes_precedence(self, tmp_path):
        """When both exist, the .json file wins."""
        (tmp_path / "de-DE.json").write_text("{}", encoding="utf-8")
        (tmp_path / "de-DE.yaml").write_text("a: b\n", encoding="utf-8")

        path, fmt = FileResourceReader(tmp_path).locate("de-DE")

        assert path.name == "de-DE.json"
        assert fmt == "json"

    def test_missing_language_raises(self, languages_dir):
        """read() raises ResourceNotFoundError for absent languages."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            FileResourceReader(languages_dir).read("de-DE")

        assert exc_info.value.language_code == "de-DE"

    def test_modified_at_missing_language(self, languages_dir):
        """modified_at() is None for absent languages."""
        assert FileResourceReader(languages_dir).modified_at("de-DE") is None


class TestInMemoryResourceReader:
    """Tests for InMemoryResourceReader."""

    def test_read(self):
        """read() serves the stored text."""
        reader = InMemoryResourceReader({"en-US": '{"a": "b"}'})

        resource = reader.read("en-US")

        assert resource.text == '{"a": "b"}'
        assert resource.format == "json"

    def test_put_and_remove(self):
        """put() adds a resource and remove() drops it."""
        reader = InMemoryResourceReader()
        reader.put("en-US", "{}")
        assert reader.read("en-US").text == "{}"

        reader.remove("en-US")

        with pytest.raises(ResourceNotFoundError):
            reader.read("en-US")
        assert reader.modified_at("en-US") is None

    def test_touch_sets_modification_time(self):
        """touch() records an explicit modification time."""
        reader = InMemoryResourceReader({"en-US": "{}"})
        when = datetime(2030, 1, 1, tzinfo=timezone.utc)

        reader.touch("en-US", when)

        assert reader.modified_at("en-US") == when
        assert reader.read("en-US").modified_at == when
