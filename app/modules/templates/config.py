"""Project configuration loading for template localization.

Reads the project file (template list and ordered language list), validates
it and memoizes it in a CacheService keyed by absolute path. A cached copy is
reused only while the file's modification time is unchanged.
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from infrastructure.caching import CacheService
from infrastructure.i18n.errors import ConfigurationError
from infrastructure.logging import get_module_logger
from modules.templates.schemas import ProjectConfiguration

logger = get_module_logger()

CONFIG_CACHE_TTL_SECONDS = 3600


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return ", ".join(parts)


class ProjectConfigLoader:
    """Loads and caches ProjectConfiguration files.

    Attributes:
        cache: CacheService memoizing parsed configurations.
        ttl_seconds: Cache lifetime of a configuration.
    """

    def __init__(
        self,
        cache: Optional[CacheService] = None,
        ttl_seconds: int = CONFIG_CACHE_TTL_SECONDS,
    ):
        self.cache = cache or CacheService(strategy="memory")
        self.ttl_seconds = ttl_seconds
        self._paths: set = set()

    @staticmethod
    def cache_key(path: Path | str) -> str:
        return f"config:{Path(path).resolve()}"

    def load(self, path: Path | str) -> ProjectConfiguration:
        """Load a project configuration file.

        Args:
            path: JSON configuration file.

        Returns:
            Validated ProjectConfiguration.

        Raises:
            ConfigurationError: If the file is missing, not valid JSON or
                fails validation.
        """
        absolute = Path(path).resolve()
        cache_key = self.cache_key(absolute)

        if not absolute.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {absolute}", {"path": str(absolute)}
            )

        mtime = absolute.stat().st_mtime
        cached = self.cache.get(cache_key)
        if cached is not None and cached.get("mtime") == mtime:
            logger.debug("using_cached_configuration", path=str(absolute))
            return ProjectConfiguration.model_validate(cached["config"])

        try:
            raw = json.loads(absolute.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {e}", {"path": str(absolute)}
            ) from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(
                f"Configuration file is not valid UTF-8: {e}", {"path": str(absolute)}
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load configuration: {e}", {"path": str(absolute)}
            ) from e

        config = self.validate(raw, source=str(absolute))
        self._paths.add(str(absolute))

        self.cache.set(
            cache_key,
            {"mtime": mtime, "config": config.to_dict()},
            self.ttl_seconds,
        )
        logger.info(
            "configuration_loaded",
            path=str(absolute),
            templates=len(config.templates),
            languages=len(config.languages),
        )
        return config

    def validate(self, raw: object, source: str = "<memory>") -> ProjectConfiguration:
        """Validate raw configuration data.

        Warnings (unusual sender address or language code format) are
        logged, not raised.

        Raises:
            ConfigurationError: If validation fails.
        """
        if not isinstance(raw, dict):
            raise ConfigurationError("Configuration must be an object", {"path": source})

        try:
            config = ProjectConfiguration.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {_format_validation_error(e)}",
                {"path": source},
            ) from e

        for warning in config.warnings():
            logger.warning("configuration_warning", path=source, warning=warning)

        return config

    def save(self, path: Path | str, config: ProjectConfiguration) -> None:
        """Write a configuration file and refresh its cache entry.

        Raises:
            ConfigurationError: If the file cannot be written.
        """
        absolute = Path(path).resolve()
        try:
            absolute.parent.mkdir(parents=True, exist_ok=True)
            absolute.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration: {e}", {"path": str(absolute)}
            ) from e

        self._paths.add(str(absolute))
        self.cache.set(
            self.cache_key(absolute),
            {"mtime": absolute.stat().st_mtime, "config": config.to_dict()},
            self.ttl_seconds,
        )
        logger.info("configuration_saved", path=str(absolute))

    def invalidate(self, path: Path | str | None = None) -> None:
        """Drop one cached configuration, or every configuration loaded here."""
        if path is not None:
            self.cache.delete(self.cache_key(path))
            self._paths.discard(str(Path(path).resolve()))
            logger.debug("invalidated_configuration_cache", path=str(path))
        else:
            for loaded in self._paths:
                self.cache.delete(self.cache_key(loaded))
            self._paths.clear()
            logger.debug("cleared_configuration_cache")
