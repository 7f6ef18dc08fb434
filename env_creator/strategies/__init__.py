"""Concrete strategy implementations."""

from env_creator.strategies.editors import (
    NullEditor,
    PromptLoopEditor,
)
from env_creator.strategies.ignore_files import (
    GitignoreUpdater,
)
from env_creator.strategies.locators import (
    FileSystemTemplateLocator,
)
from env_creator.strategies.prompters import (
    ConsolePrompter,
)
from env_creator.strategies.template_engine import (
    TemplateProcessor,
)

__all__ = [
    "ConsolePrompter",
    "FileSystemTemplateLocator",
    "GitignoreUpdater",
    "NullEditor",
    "PromptLoopEditor",
    "TemplateProcessor",
]
