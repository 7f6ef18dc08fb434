"""Ignore-rules file interfaces.

Defines the parsed view of an ignore-rules file and the abstract base class
for strategies that make sure a generated file is listed in it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IgnoreRuleSet:
    """The lines of an ignore-rules file.

    Attributes:
        content: The file content as read (empty when the file is absent).
        lines: ``content`` split on newlines.
    """

    content: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, content: str) -> "IgnoreRuleSet":
        """Split ignore-rules text into lines, keeping the original content."""
        return cls(content=content, lines=tuple(content.split("\n")))

    @staticmethod
    def accepted_forms(target: str) -> set[str]:
        """Return the literal lines that count as ignoring ``target``.

        These are the bare name, the rooted form and a single-level wildcard
        over the name's extension (``.env`` -> ``{".env", "/.env", "*.env"}``).
        """
        forms = {target, f"/{target}"}
        if "." in target:
            forms.add(f"*.{target.rsplit('.', 1)[1]}")
        return forms

    def contains(self, target: str) -> bool:
        """Return True if a trimmed line equals one of the accepted forms."""
        forms = self.accepted_forms(target)
        return any(line.strip() in forms for line in self.lines)

    def with_entry(self, target: str) -> str:
        """Return the content with ``target`` appended on its own line."""
        content = self.content
        if content and not content.endswith("\n"):
            content += "\n"
        return f"{content}{target}\n"


class BaseIgnoreFileUpdater(ABC):
    """Abstract base class for ignore-rules update strategies."""

    @abstractmethod
    def load(self, root: Path) -> IgnoreRuleSet:
        """Read the ignore-rules file under ``root``.

        Args:
            root: The workspace root.

        Returns:
            The parsed rule set; an absent file yields an empty one.
        """

    @abstractmethod
    def ensure_entry(self, root: Path) -> bool:
        """Make sure the target entry is present, asking before any change.

        Args:
            root: The workspace root.

        Returns:
            True if an entry was appended, False otherwise.
        """
