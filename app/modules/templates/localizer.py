"""Batch localization of email templates.

Template bodies mark translatable text with localizeMessage calls:

    <h1>${localizeMessage("welcome.title")}</h1>

Each call is replaced by the Liquid conditional for its key. Batch builds
use lenient resolution, so one missing translation shows up as a
[MISSING: key] placeholder instead of stopping the whole build.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from infrastructure.i18n.errors import ConfigurationError
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.models import TranslationCatalog
from infrastructure.i18n.resolvers import LiquidConditionResolver, missing_placeholder
from infrastructure.logging import bind_build_context, get_module_logger
from modules.templates.schemas import ProjectConfiguration, TemplateConfiguration

logger = get_module_logger()

LOCALIZE_CALL = re.compile(r"""\$\{localizeMessage\(['"`]([^'"`]+)['"`]\)\}""")


def find_translation_keys(content: str) -> List[str]:
    """Keys referenced by localizeMessage calls, in order of first use."""
    keys: List[str] = []
    for key in LOCALIZE_CALL.findall(content):
        if key not in keys:
            keys.append(key)
    return keys


@dataclass
class LocalizedTemplate:
    """Result of localizing one template.

    Attributes:
        name: Template name.
        body: Template body with every localizeMessage call expanded.
        subject: Liquid conditional for the subject line.
        missing_keys: Keys rendered as placeholders in at least one language.
    """

    name: str
    body: str
    subject: str
    missing_keys: List[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing_keys


class TemplateLocalizer:
    """Expands localizeMessage calls in template text.

    Attributes:
        resolver: Resolver used in lenient mode.
    """

    def __init__(self, resolver: LiquidConditionResolver):
        self.resolver = resolver

    def localize(
        self,
        content: str,
        catalogs: Mapping[str, TranslationCatalog],
        languages: Optional[Sequence[str]] = None,
    ) -> str:
        """Replace every localizeMessage call in content.

        Args:
            content: Template text.
            catalogs: Loaded catalogs by language code.
            languages: Ordered languages (default: resolver languages).

        Returns:
            Content with Liquid conditionals in place of the calls.

        Raises:
            ConfigurationError: If the language list is empty.
        """
        return LOCALIZE_CALL.sub(
            lambda match: self.resolver.resolve_from_catalogs(
                match.group(1), catalogs, languages
            ),
            content,
        )

    def localize_subject(
        self,
        template: TemplateConfiguration,
        catalogs: Mapping[str, TranslationCatalog],
        languages: Optional[Sequence[str]] = None,
    ) -> str:
        return self.resolver.resolve_from_catalogs(template.subject_key, catalogs, languages)

    def localize_template(
        self,
        template: TemplateConfiguration,
        content: str,
        catalogs: Mapping[str, TranslationCatalog],
        languages: Sequence[str],
    ) -> LocalizedTemplate:
        """Localize the body and subject of one template."""
        body = self.localize(content, catalogs, languages)
        subject = self.localize_subject(template, catalogs, languages)

        missing = [
            key
            for key in find_translation_keys(content) + [template.subject_key]
            if missing_placeholder(key) in body or missing_placeholder(key) in subject
        ]
        missing = list(dict.fromkeys(missing))

        if missing:
            logger.warning(
                "template_has_missing_translations",
                template=template.name,
                missing_keys=missing,
            )

        return LocalizedTemplate(
            name=template.name, body=body, subject=subject, missing_keys=missing
        )


def localize_project(
    project: ProjectConfiguration,
    templates: Mapping[str, str],
    loader: CatalogLoader,
    resolver: Optional[LiquidConditionResolver] = None,
    build_id: Optional[str] = None,
) -> Dict[str, LocalizedTemplate]:
    """Localize every enabled template of a project.

    Catalogs for all project languages are loaded once up front. The
    default language must load; other languages that fail to load render
    placeholders.

    Args:
        project: Validated project configuration.
        templates: Template body by template name.
        loader: CatalogLoader for the project languages.
        resolver: Resolver to use (default: a resolver over loader with the
            project languages).
        build_id: Identifier bound to every log entry of this build.

    Returns:
        LocalizedTemplate by template name.

    Raises:
        ConfigurationError: If an enabled template has no body.
        LanguageNotFoundError: If the default language cannot be loaded.
    """
    languages = project.ordered_language_codes()
    resolver = resolver or LiquidConditionResolver(loader, languages=languages)
    localizer = TemplateLocalizer(resolver)

    with bind_build_context(build_id=build_id, project=project.name):
        report = loader.load_many(languages)
        if report.failures:
            logger.warning("languages_degraded", failures=report.failures)

        results: Dict[str, LocalizedTemplate] = {}
        for template in project.enabled_templates():
            content = templates.get(template.name)
            if content is None:
                raise ConfigurationError(
                    f"No template body for '{template.name}'",
                    {"template": template.name},
                )
            results[template.name] = localizer.localize_template(
                template, content, report.catalogs, languages
            )

        logger.info(
            "project_localized",
            templates=len(results),
            incomplete=[name for name, result in results.items() if not result.is_complete],
        )

    return results
