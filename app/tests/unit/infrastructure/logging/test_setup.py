"""Unit tests for infrastructure.logging.setup module."""

import logging

import pytest
import structlog

from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.logging.setup import SILENT_LEVEL, build_processors, resolve_level

pytestmark = pytest.mark.unit


@pytest.fixture
def restore_logging():
    """Reinstall the quiet configuration after a test changes it."""
    yield
    configure_logging(quiet=True)


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_suppressed_under_pytest(self):
        """Logging is silenced while tests run."""
        configure_logging()

        assert logging.root.level == SILENT_LEVEL

    def test_returns_logger(self):
        """A usable bound logger is returned."""
        logger = configure_logging()

        logger.info("test_event", key="value")

    @pytest.mark.usefixtures("restore_logging")
    def test_explicit_level_when_not_quiet(self):
        """Outside quiet mode the requested level is applied."""
        configure_logging(log_level="warning", is_production=True, quiet=False)

        assert logging.root.level == logging.WARNING

    @pytest.mark.usefixtures("restore_logging")
    def test_production_renders_json(self):
        """Production mode ends the processor chain with the JSON renderer."""
        configure_logging(is_production=True, quiet=False)

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


class TestResolveLevel:
    """Test suite for resolve_level()."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("error", logging.ERROR),
            (None, logging.INFO),
            ("", logging.INFO),
            ("chatty", logging.INFO),
        ],
    )
    def test_names(self, name, expected):
        """Level names are case-insensitive and default to INFO."""
        assert resolve_level(name) == expected


class TestBuildProcessors:
    """Test suite for build_processors()."""

    def test_console_renderer_for_development(self):
        """Non-JSON output uses the console renderer."""
        processors = build_processors(json_output=False)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert processors[0] is structlog.contextvars.merge_contextvars


class TestGetModuleLogger:
    """Test suite for get_module_logger()."""

    def test_binds_module_context(self):
        """The calling module name is bound as context."""
        import infrastructure.i18n.loader as loader_module

        context = loader_module.logger._context

        assert context["module_path"] == "infrastructure.i18n.loader"
        assert context["component"] == "loader"

    def test_binds_test_module_name(self):
        """A logger requested here is tagged with this module's name."""
        context = get_module_logger()._context

        assert context["module_path"] == __name__
        assert context["component"] == __name__.rsplit(".", 1)[-1]

    def test_returns_bound_logger(self):
        """The returned logger accepts events."""
        get_module_logger().info("test_event")
