"""Exceptions raised while creating an environment file.

User cancellation is not modelled as an exception: prompts return ``None``
and the orchestrator ends the run quietly.
"""

from pathlib import Path


class EnvCreatorError(Exception):
    """Base exception for env-creator failures."""

    pass


class NoWorkspaceError(EnvCreatorError):
    """Raised when there is no usable workspace root directory."""

    def __init__(self, root: Path | None = None) -> None:
        """Initialize the error.

        Args:
            root: The rejected root, or None when no root was given.
        """
        self.root = root
        if root is None:
            super().__init__("No workspace folder open")
        else:
            super().__init__(f"No workspace folder open: {root} is not a directory")


class NoTemplateFoundError(EnvCreatorError):
    """Raised when the locator finds no template below the workspace root."""

    def __init__(self, template_names: tuple[str, ...]) -> None:
        """Initialize the error.

        Args:
            template_names: Names that were searched for.
        """
        self.template_names = template_names
        examples = ", ".join(template_names[:2])
        super().__init__(f"No .env template files found (e.g., {examples})")


class EnvFileWriteError(EnvCreatorError):
    """Raised when a generated file cannot be written to disk."""

    def __init__(self, path: Path, cause: Exception) -> None:
        """Initialize the error.

        Args:
            path: File that could not be written.
            cause: The underlying OS or encoding error.
        """
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write {path}: {cause}")


class InteractiveFillError(EnvCreatorError):
    """Raised when the interactive editor cannot fill or open a file."""

    pass
