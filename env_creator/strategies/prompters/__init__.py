"""Concrete prompter implementations."""

from env_creator.strategies.prompters.console import ConsolePrompter

__all__ = [
    "ConsolePrompter",
]
