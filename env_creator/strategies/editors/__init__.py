"""Concrete interactive editor implementations."""

from env_creator.strategies.editors.null import NullEditor
from env_creator.strategies.editors.prompt_loop import PromptLoopEditor

__all__ = [
    "NullEditor",
    "PromptLoopEditor",
]
