"""Unit tests for infrastructure.logging.context module."""

import uuid

import pytest
import structlog

from infrastructure.logging import bind_build_context, get_build_id

pytestmark = pytest.mark.unit


class TestBindBuildContext:
    """Test suite for bind_build_context context manager."""

    def test_generates_build_id(self):
        """A build id is generated when none is given."""
        with bind_build_context() as build_id:
            assert get_build_id() == build_id
            uuid.UUID(build_id)

    def test_uses_provided_build_id(self):
        """A provided build id is bound as-is."""
        with bind_build_context(build_id="build-42"):
            assert get_build_id() == "build-42"

    def test_binds_extra_context(self):
        """Extra keyword arguments are bound too."""
        with bind_build_context(project="Emails"):
            assert structlog.contextvars.get_contextvars()["project"] == "Emails"

    def test_unbinds_on_exit(self):
        """Context is removed after the block, even on error."""
        with pytest.raises(RuntimeError):
            with bind_build_context(build_id="b", project="p"):
                raise RuntimeError("boom")

        assert get_build_id() is None
        assert "project" not in structlog.contextvars.get_contextvars()
