"""Abstract base classes for env-creator strategies."""

from env_creator.interfaces.editor import BaseInteractiveEditor
from env_creator.interfaces.errors import (
    EnvCreatorError,
    EnvFileWriteError,
    InteractiveFillError,
    NoTemplateFoundError,
    NoWorkspaceError,
)
from env_creator.interfaces.ignore import BaseIgnoreFileUpdater, IgnoreRuleSet
from env_creator.interfaces.locator import BaseTemplateLocator, TemplateFile
from env_creator.interfaces.prompter import BasePrompter, PickItem
from env_creator.interfaces.template import (
    Assignment,
    BaseTemplateProcessor,
    ParsedLine,
    Passthrough,
    PlaceholderMarker,
    ProcessedTemplate,
)

__all__ = [
    "Assignment",
    "BaseIgnoreFileUpdater",
    "BaseInteractiveEditor",
    "BasePrompter",
    "BaseTemplateLocator",
    "BaseTemplateProcessor",
    "EnvCreatorError",
    "EnvFileWriteError",
    "IgnoreRuleSet",
    "InteractiveFillError",
    "NoTemplateFoundError",
    "NoWorkspaceError",
    "ParsedLine",
    "Passthrough",
    "PickItem",
    "PlaceholderMarker",
    "ProcessedTemplate",
    "TemplateFile",
]
