"""Small helpers shared by strategies and the orchestrator."""

from env_creator.utils.files import read_text, write_text

__all__ = [
    "read_text",
    "write_text",
]
