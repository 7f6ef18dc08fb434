"""Abstract base class for template locators.

The Strategy Pattern allows different discovery implementations
to be interchangeable at runtime.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TemplateFile:
    """A template file discovered below a workspace root.

    Attributes:
        path: Absolute path to the template.
        name: Display name (the file's basename).
        relative_path: Path of the template relative to the workspace root.
    """

    path: Path
    name: str
    relative_path: str

    @classmethod
    def from_path(cls, path: Path, root: Path) -> "TemplateFile":
        """Build a TemplateFile for ``path`` found below ``root``."""
        return cls(
            path=path,
            name=path.name,
            relative_path=os.path.relpath(path, root),
        )


class BaseTemplateLocator(ABC):
    """Abstract base class for template discovery strategies.

    Example:
        ```python
        class FileSystemTemplateLocator(BaseTemplateLocator):
            def find_templates(self, root: Path) -> list[TemplateFile]:
                # Implementation here
                pass
        ```
    """

    @abstractmethod
    def find_templates(self, root: Path) -> list[TemplateFile]:
        """Find every template file below a root directory.

        Args:
            root: The workspace root to search.

        Returns:
            Matches in discovery order. An empty list means no template
            was found; it is not an error.
        """
        ...

    @property
    @abstractmethod
    def template_names(self) -> tuple[str, ...]:
        """Return the file names recognized as templates.

        Returns:
            A tuple of base names (e.g., ('.env.example', '.env.template')).
        """
        ...
