"""Email template localization.

Validated project configuration plus batch expansion of localizeMessage
calls into Liquid conditionals.
"""

from modules.templates.config import ProjectConfigLoader
from modules.templates.localizer import (
    LocalizedTemplate,
    TemplateLocalizer,
    find_translation_keys,
    localize_project,
)
from modules.templates.schemas import (
    LanguageConfiguration,
    ProjectConfiguration,
    TemplateConfiguration,
)

__all__ = [
    "LanguageConfiguration",
    "LocalizedTemplate",
    "ProjectConfigLoader",
    "ProjectConfiguration",
    "TemplateConfiguration",
    "TemplateLocalizer",
    "find_translation_keys",
    "localize_project",
]
