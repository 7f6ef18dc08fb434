"""User prompt interface.

Every prompt is a blocking request/response call. A dismissed prompt
(Ctrl-C, end of input) returns ``None``, which callers treat as "cancel".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PickItem:
    """One entry of a pick list.

    Attributes:
        label: Primary text shown for the entry.
        description: Secondary text (e.g., a relative path).
    """

    label: str
    description: str = ""


class BasePrompter(ABC):
    """Abstract base class for user interaction strategies."""

    @abstractmethod
    def pick(self, items: list[PickItem], placeholder: str) -> int | None:
        """Ask the user to choose one item.

        Args:
            items: Entries to display, in order.
            placeholder: Title shown above the entries.

        Returns:
            Index of the chosen item, or None if the prompt was dismissed.
        """

    @abstractmethod
    def info(self, message: str, *choices: str) -> str | None:
        """Show an informational message, optionally asking for a choice.

        Returns:
            The chosen label, or None when there are no choices or the
            prompt was dismissed.
        """

    @abstractmethod
    def warning(self, message: str, *choices: str) -> str | None:
        """Show a warning, optionally asking for a choice.

        Returns:
            The chosen label, or None when there are no choices or the
            prompt was dismissed.
        """

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error message."""

    @abstractmethod
    def ask(self, message: str, default: str = "") -> str | None:
        """Ask for free text, pre-filled with ``default``.

        Returns:
            The entered text, or None if the prompt was dismissed.
        """
