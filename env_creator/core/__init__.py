"""Core configuration, factory and creation flow."""

from env_creator.core.config import Settings, get_settings
from env_creator.core.creator import CreateOutcome, EnvCreator
from env_creator.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "CreateOutcome",
    "EnvCreator",
    "ComponentFactory",
]
