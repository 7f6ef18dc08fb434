"""Interactive editor capability.

Opening a file and filling tab stops one after another are provided by the
host environment. The orchestrator only calls the editor through this
interface, and only asks for interactive filling when placeholders exist.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from env_creator.interfaces.template import PlaceholderMarker


class BaseInteractiveEditor(ABC):
    """Abstract base class for editor integration strategies."""

    @abstractmethod
    def open(self, path: Path) -> None:
        """Show an existing file to the user.

        Raises:
            InteractiveFillError: If the file cannot be opened.
        """

    @abstractmethod
    def insert_interactive_template(
        self,
        target: Path,
        snippet: str,
        stops: Sequence[PlaceholderMarker],
    ) -> None:
        """Let the user fill every stop of ``snippet`` in order.

        The target file already holds the plain template copy when this is
        called; implementations replace its content with the filled text.

        Args:
            target: The generated file.
            snippet: Template text with ``${n:default}`` stops.
            stops: The stops in index order.

        Raises:
            InteractiveFillError: If the filled text cannot be saved.
        """
