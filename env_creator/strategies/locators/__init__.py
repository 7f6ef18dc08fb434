"""Concrete template locator implementations."""

from env_creator.strategies.locators.filesystem import (
    DEFAULT_SKIP_DIRS,
    DEFAULT_TEMPLATE_NAMES,
    FileSystemTemplateLocator,
)

__all__ = [
    "DEFAULT_SKIP_DIRS",
    "DEFAULT_TEMPLATE_NAMES",
    "FileSystemTemplateLocator",
]
