"""Git ignore-rules updater.

Appends the generated file's name to the workspace ``.gitignore`` after
asking the user. Existing lines are never removed or reordered.
"""

import logging
from pathlib import Path

from env_creator.interfaces.ignore import BaseIgnoreFileUpdater, IgnoreRuleSet
from env_creator.interfaces.prompter import BasePrompter
from env_creator.utils.files import read_text, write_text

logger = logging.getLogger(__name__)

YES = "Yes"
NO = "No"


class GitignoreUpdater(BaseIgnoreFileUpdater):
    """Keeps a target file listed in the workspace ignore-rules file."""

    def __init__(
        self,
        prompter: BasePrompter,
        target_name: str = ".env",
        ignore_file_name: str = ".gitignore",
    ) -> None:
        """Initialize the updater.

        Args:
            prompter: Used to confirm the change with the user.
            target_name: Entry that must be ignored.
            ignore_file_name: Name of the ignore-rules file at the root.
        """
        self._prompter = prompter
        self._target_name = target_name
        self._ignore_file_name = ignore_file_name

    def load(self, root: Path) -> IgnoreRuleSet:
        """Read the ignore-rules file at the root.

        Args:
            root: Workspace root directory.

        Returns:
            The parsed rules. Empty when the file does not exist.
        """
        ignore_path = Path(root) / self._ignore_file_name
        if not ignore_path.exists():
            logger.debug(f"No {self._ignore_file_name} at {root}")
            return IgnoreRuleSet.from_text("")
        return IgnoreRuleSet.from_text(read_text(ignore_path))

    def ensure_entry(self, root: Path) -> bool:
        """Ask to add the target when the ignore-rules file lacks it.

        Args:
            root: Workspace root directory.

        Returns:
            True if the entry was appended, False if it was already present
            or the user declined.

        Raises:
            EnvFileWriteError: If the ignore-rules file cannot be written.
        """
        rules = self.load(root)
        if rules.contains(self._target_name):
            logger.info(f"{self._target_name} already listed in {self._ignore_file_name}")
            return False

        answer = self._prompter.info(
            f"{self._target_name} is not in {self._ignore_file_name}. "
            f"Would you like to add it?",
            YES,
            NO,
        )
        if answer != YES:
            logger.info(f"User declined to add {self._target_name} to {self._ignore_file_name}")
            return False

        ignore_path = Path(root) / self._ignore_file_name
        write_text(ignore_path, rules.with_entry(self._target_name))
        logger.info(f"Appended {self._target_name} to {ignore_path}")

        self._prompter.info(f"{self._target_name} added to {self._ignore_file_name}")
        return True
