"""Environment file creation flow.

Ties the strategies together: locate a template, let the user pick one,
resolve the target next to it, write the copy, fill placeholders and
finally offer to ignore the generated file.
"""

import enum
import logging
from pathlib import Path

import structlog

from env_creator.interfaces.editor import BaseInteractiveEditor
from env_creator.interfaces.errors import (
    EnvCreatorError,
    NoTemplateFoundError,
    NoWorkspaceError,
)
from env_creator.interfaces.ignore import BaseIgnoreFileUpdater
from env_creator.interfaces.locator import BaseTemplateLocator, TemplateFile
from env_creator.interfaces.prompter import BasePrompter, PickItem
from env_creator.interfaces.template import BaseTemplateProcessor
from env_creator.utils.files import read_text, write_text

logger = logging.getLogger(__name__)
events = structlog.get_logger(__name__)

OPEN_EXISTING = "Open Existing"
OVERWRITE = "Overwrite"
CANCEL = "Cancel"


class CreateOutcome(str, enum.Enum):
    """Terminal state of one creation run."""

    CREATED = "created"
    OPENED_EXISTING = "opened_existing"
    CANCELLED = "cancelled"
    NO_WORKSPACE = "no_workspace"
    NO_TEMPLATE_FOUND = "no_template_found"
    FAILED = "failed"

    @property
    def is_failure(self) -> bool:
        """Whether the outcome should be reported as a failed run."""
        return self in (
            CreateOutcome.NO_WORKSPACE,
            CreateOutcome.NO_TEMPLATE_FOUND,
            CreateOutcome.FAILED,
        )


class EnvCreator:
    """Creates an environment file from a template found in a workspace.

    Every prompt can be dismissed; dismissal ends the run without side
    effects. I/O failures are reported once through the prompter and are
    not rolled back.

    Example:
        ```python
        factory = ComponentFactory(get_settings())
        outcome = factory.get_creator().run(Path.cwd())
        ```
    """

    def __init__(
        self,
        locator: BaseTemplateLocator,
        processor: BaseTemplateProcessor,
        ignore_updater: BaseIgnoreFileUpdater,
        editor: BaseInteractiveEditor,
        prompter: BasePrompter,
        target_name: str = ".env",
    ) -> None:
        """Initialize the creator.

        Args:
            locator: Finds templates below the workspace root.
            processor: Detects placeholders in the chosen template.
            ignore_updater: Registers the target in the ignore-rules file.
            editor: Opens files and fills placeholders interactively.
            prompter: Asks the user questions and shows messages.
            target_name: Name of the generated file.
        """
        self._locator = locator
        self._processor = processor
        self._ignore_updater = ignore_updater
        self._editor = editor
        self._prompter = prompter
        self._target_name = target_name

    def run(self, workspace_root: Path | None) -> CreateOutcome:
        """Run the whole creation flow once.

        Args:
            workspace_root: Directory to search for templates.

        Returns:
            The outcome of the run.
        """
        try:
            root = self._resolve_workspace(workspace_root)
            templates = self._locate(root)
        except NoWorkspaceError as e:
            self._prompter.error(str(e))
            return self._finish(CreateOutcome.NO_WORKSPACE)
        except NoTemplateFoundError as e:
            self._prompter.error(str(e))
            return self._finish(CreateOutcome.NO_TEMPLATE_FOUND)

        template = self._select_template(templates)
        if template is None:
            logger.info("Template selection dismissed")
            return self._finish(CreateOutcome.CANCELLED)

        env_path = template.path.parent / self._target_name

        if env_path.exists():
            action = self._prompter.warning(
                f"{self._target_name} file already exists. "
                f"Would you like to open the existing file or overwrite it?",
                OPEN_EXISTING,
                OVERWRITE,
                CANCEL,
            )
            if action == OPEN_EXISTING:
                try:
                    self._editor.open(env_path)
                except EnvCreatorError as e:
                    logger.error(f"Failed to open {env_path}: {e}")
                    self._prompter.error(f"Failed to open {self._target_name} file: {e}")
                    return self._finish(CreateOutcome.FAILED, template)
                return self._finish(CreateOutcome.OPENED_EXISTING, template)
            if action != OVERWRITE:
                logger.info(f"Keeping existing {env_path}")
                return self._finish(CreateOutcome.CANCELLED, template)

        try:
            self._write(template, env_path)
            self._prompter.info(f"{self._target_name} file created successfully")
            self._ignore_updater.ensure_entry(root)
        except (EnvCreatorError, OSError, UnicodeError) as e:
            logger.error(f"Failed to create {env_path}: {e}", exc_info=True)
            self._prompter.error(f"Failed to create {self._target_name} file: {e}")
            return self._finish(CreateOutcome.FAILED, template)

        return self._finish(CreateOutcome.CREATED, template)

    def _resolve_workspace(self, workspace_root: Path | None) -> Path:
        """Validate the workspace root.

        Raises:
            NoWorkspaceError: If no root is given or it is not a directory.
        """
        if workspace_root is None:
            raise NoWorkspaceError()
        root = Path(workspace_root)
        if not root.is_dir():
            raise NoWorkspaceError(root)
        return root

    def _locate(self, root: Path) -> list[TemplateFile]:
        """Find templates below the root.

        Raises:
            NoTemplateFoundError: If the locator finds nothing.
        """
        templates = self._locator.find_templates(root)
        if not templates:
            raise NoTemplateFoundError(self._locator.template_names)
        return templates

    def _select_template(self, templates: list[TemplateFile]) -> TemplateFile | None:
        """Return the only template, or the one the user picks.

        Returns:
            The chosen template, or None when the pick is dismissed.
        """
        if len(templates) == 1:
            return templates[0]

        index = self._prompter.pick(
            [PickItem(label=t.name, description=t.relative_path) for t in templates],
            placeholder="Select a template file",
        )
        if index is None:
            return None
        return templates[index]

    def _write(self, template: TemplateFile, env_path: Path) -> None:
        """Copy the template to the target and fill its placeholders.

        Args:
            template: The chosen template.
            env_path: Where the generated file is written.
        """
        processed = self._processor.process(read_text(template.path))

        write_text(env_path, processed.content)
        logger.info(f"Copied {template.path} to {env_path}")

        if processed.has_placeholder:
            self._editor.insert_interactive_template(
                env_path,
                processed.snippet_content,
                processed.placeholders,
            )

    def _finish(
        self,
        outcome: CreateOutcome,
        template: TemplateFile | None = None,
    ) -> CreateOutcome:
        """Record the outcome of the run and return it."""
        events.info(
            "env_file_run_finished",
            outcome=outcome.value,
            template=str(template.path) if template else None,
        )
        return outcome
