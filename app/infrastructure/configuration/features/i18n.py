"""Localization feature settings."""

import json
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Configuration for translation catalogs and Liquid condition rendering.

    Environment Variables:
        I18N_LANGUAGES_DIR: Directory holding <language>.json catalogs (default: languages)
        I18N_LANGUAGES: Ordered language codes, highest priority first (default: en-US)
        I18N_CATALOG_TTL_SECONDS: Cache lifetime of a loaded catalog (default: 3600s = 1h)
        I18N_LANGUAGE_VARIABLE: Liquid variable compared in each branch
            (default: user.user_metadata.language)

    Language list format (I18N_LANGUAGES):
        Either a JSON array or a comma-separated string:

            I18N_LANGUAGES='["fr-FR", "en-US"]'
            I18N_LANGUAGES=fr-FR,en-US

        The first language is the default: it renders the `if` branch and
        the closing `else` branch.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        resolver = LiquidConditionResolver(
            loader,
            languages=settings.i18n.languages,
            language_variable=settings.i18n.language_variable,
        )
        ```
    """

    languages_dir: str = Field(
        default="languages",
        alias="I18N_LANGUAGES_DIR",
        description="Directory containing translation catalogs",
    )
    languages: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["en-US"],
        alias="I18N_LANGUAGES",
        description="Ordered language codes, highest priority first",
    )
    catalog_ttl_seconds: int = Field(
        default=3600,
        alias="I18N_CATALOG_TTL_SECONDS",
        description="Cache time-to-live for loaded catalogs (seconds, 1 hour)",
    )
    language_variable: str = Field(
        default="user.user_metadata.language",
        alias="I18N_LANGUAGE_VARIABLE",
        description="Liquid variable holding the recipient language",
    )

    @field_validator("languages", mode="before")
    @classmethod
    def _parse_languages(cls, v: Optional[Any]) -> Any:
        """Parse I18N_LANGUAGES from a JSON array, CSV string or list."""
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return [str(code).strip() for code in v]
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid I18N_LANGUAGES JSON: {e} (value: {s[:80]}...)"
                    ) from e
            return [code.strip() for code in s.split(",") if code.strip()]
        raise ValueError("I18N_LANGUAGES must be a JSON array, CSV string or list")

    @field_validator("languages")
    @classmethod
    def _unique_languages(cls, v: list[str]) -> list[str]:
        """Reject duplicated language codes; order is significant."""
        duplicates = sorted({code for code in v if v.count(code) > 1})
        if duplicates:
            raise ValueError(f"Duplicate language codes: {', '.join(duplicates)}")
        return v
