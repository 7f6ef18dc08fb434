"""Concrete ignore-rules updater implementations."""

from env_creator.strategies.ignore_files.gitignore import GitignoreUpdater

__all__ = [
    "GitignoreUpdater",
]
