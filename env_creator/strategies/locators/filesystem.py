"""File-system template locator.

Walks a directory tree depth-first and collects environment templates.
Discovery is best-effort: unreadable directories are skipped and never
reported to the caller.
"""

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from env_creator.interfaces.locator import BaseTemplateLocator, TemplateFile

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAMES: tuple[str, ...] = (
    ".env.example",
    ".env.template",
    ".env.sample",
    ".env.dist",
)

DEFAULT_SKIP_DIRS: tuple[str, ...] = ("node_modules",)


class FileSystemTemplateLocator(BaseTemplateLocator):
    """Finds template files by exact base name below a root directory.

    Hidden directories (leading ``.``) and the names in ``skip_dirs`` are
    never entered. Results follow the order of the directory listings and
    are not sorted.
    """

    def __init__(
        self,
        template_names: Iterable[str] = DEFAULT_TEMPLATE_NAMES,
        skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
    ) -> None:
        """Initialize the locator.

        Args:
            template_names: Base names recognized as templates.
            skip_dirs: Directory names that are never searched.
        """
        self._template_names = tuple(template_names)
        self._skip_dirs = frozenset(skip_dirs)

    @property
    def template_names(self) -> tuple[str, ...]:
        """Base names recognized as templates."""
        return self._template_names

    def find_templates(self, root: Path) -> list[TemplateFile]:
        """Find every template below the root directory.

        Args:
            root: Directory to search. Relative paths are made absolute.

        Returns:
            List of TemplateFile objects in discovery order. Empty when
            nothing matches or the root cannot be read.
        """
        root = Path(os.path.abspath(root))
        logger.info(f"Searching for templates under {root}")

        matches: list[Path] = []
        self._search_directory(root, matches, visited=set())

        logger.info(f"Found {len(matches)} template(s) under {root}")
        return [TemplateFile.from_path(path, root) for path in matches]

    def _search_directory(
        self,
        dir_path: Path,
        matches: list[Path],
        visited: set[tuple[int, int]],
    ) -> None:
        """Recursively collect templates found in a directory.

        Args:
            dir_path: Directory to scan.
            matches: Accumulator for matching file paths.
            visited: Device and inode pairs of directories already scanned.
        """
        try:
            dir_stat = dir_path.stat()
            entries = os.listdir(dir_path)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {dir_path}: {e}")
            return

        # Symlinked directories can form cycles
        dir_id = (dir_stat.st_dev, dir_stat.st_ino)
        if dir_id in visited:
            logger.debug(f"Skipping already visited directory {dir_path}")
            return
        visited.add(dir_id)

        for name in entries:
            entry_path = dir_path / name
            try:
                mode = entry_path.stat().st_mode
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry_path}: {e}")
                continue

            if stat.S_ISDIR(mode):
                if name.startswith(".") or name in self._skip_dirs:
                    continue
                self._search_directory(entry_path, matches, visited)
            elif stat.S_ISREG(mode) and name in self._template_names:
                logger.debug(f"Template found: {entry_path}")
                matches.append(entry_path)
