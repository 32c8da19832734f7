from typing import Any, Dict, List, Annotated
import re
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from infrastructure.i18n.models import LANGUAGE_NAMES

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2}-[A-Z]{2}$")


class TemplateConfiguration(BaseModel):
    """Schema for one email template of a project."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Template name, also the output file stem",
            json_schema_extra={"example": "welcome_email"},
        ),
    ]
    from_address: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            alias="from",
            description="Sender address",
            json_schema_extra={"example": "noreply@example.com"},
        ),
    ]
    subject_key: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            alias="subjectKey",
            description="Translation key of the subject line",
            json_schema_extra={"example": "welcome.subject"},
        ),
    ]
    enabled: bool = True

    @property
    def has_valid_sender(self) -> bool:
        return bool(EMAIL_PATTERN.match(self.from_address))


class LanguageConfiguration(BaseModel):
    """Schema for one language of a project."""

    model_config = ConfigDict(extra="ignore")

    code: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Language code",
            json_schema_extra={"example": "fr-FR"},
        ),
    ]
    name: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Display name",
            json_schema_extra={"example": "French (France)"},
        ),
    ]
    enabled: bool = True
    priority: Annotated[
        int,
        Field(
            ge=1,
            description="Lower values come first; the first language is the default",
        ),
    ] = 1

    @property
    def has_standard_code(self) -> bool:
        return bool(LANGUAGE_CODE_PATTERN.match(self.code))


class ProjectConfiguration(BaseModel):
    """Schema for a localization project file.

    Accepts the legacy layout as well, where `languages` is a plain list of
    codes and `name` is absent:

        {"templates": [...], "languages": ["en-US", "fr-FR"]}

    Legacy codes get priorities by position and names from the well-known
    language table.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = "Auth0 Email Templates"
    version: str = "1.0.0"
    templates: List[TemplateConfiguration]
    languages: List[LanguageConfiguration]

    @model_validator(mode="before")
    @classmethod
    def _convert_legacy(cls, data: Any) -> Any:
        """Expand the legacy list-of-codes language layout."""
        if not isinstance(data, dict):
            return data
        languages = data.get("languages")
        if isinstance(languages, list) and all(isinstance(item, str) for item in languages):
            data = dict(data)
            data["languages"] = [
                {
                    "code": code,
                    "name": LANGUAGE_NAMES.get(code, code.upper()),
                    "enabled": True,
                    "priority": index + 1,
                }
                for index, code in enumerate(languages)
            ]
        return data

    @field_validator("templates")
    @classmethod
    def _unique_templates(cls, v: List[TemplateConfiguration]) -> List[TemplateConfiguration]:
        names = [template.name for template in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate template names: {', '.join(duplicates)}")
        return v

    @field_validator("languages")
    @classmethod
    def _unique_languages(cls, v: List[LanguageConfiguration]) -> List[LanguageConfiguration]:
        if not v:
            raise ValueError("at least one language is required")
        codes = [language.code for language in v]
        duplicates = sorted({code for code in codes if codes.count(code) > 1})
        if duplicates:
            raise ValueError(f"Duplicate language codes: {', '.join(duplicates)}")
        return v

    @model_validator(mode="after")
    def _require_enabled_language(self) -> "ProjectConfiguration":
        if not any(language.enabled for language in self.languages):
            raise ValueError("at least one language must be enabled")
        return self

    def ordered_language_codes(self) -> List[str]:
        """Enabled language codes by ascending priority, ties in file order."""
        enabled = [language for language in self.languages if language.enabled]
        return [
            language.code
            for language in sorted(enabled, key=lambda language: language.priority)
        ]

    def enabled_templates(self) -> List[TemplateConfiguration]:
        return [template for template in self.templates if template.enabled]

    def warnings(self) -> List[str]:
        """Non-fatal configuration issues."""
        issues = []
        for index, template in enumerate(self.templates):
            if not template.has_valid_sender:
                issues.append(f"templates[{index}].from should be a valid email address")
        for index, language in enumerate(self.languages):
            if not language.has_standard_code:
                issues.append(
                    f'languages[{index}].code should be in format like "en-US", "fr-FR"'
                )
        return issues

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
