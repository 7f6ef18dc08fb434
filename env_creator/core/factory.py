"""Component Factory for strategy instantiation.

The Factory Pattern allows the command line to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from env_creator.core.config import Settings, get_settings
from env_creator.core.creator import EnvCreator
from env_creator.interfaces.editor import BaseInteractiveEditor
from env_creator.interfaces.ignore import BaseIgnoreFileUpdater
from env_creator.interfaces.locator import BaseTemplateLocator
from env_creator.interfaces.prompter import BasePrompter
from env_creator.interfaces.template import BaseTemplateProcessor
from env_creator.strategies.editors import NullEditor, PromptLoopEditor
from env_creator.strategies.ignore_files import GitignoreUpdater
from env_creator.strategies.locators import FileSystemTemplateLocator
from env_creator.strategies.prompters import ConsolePrompter
from env_creator.strategies.template_engine import TemplateProcessor

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        settings = get_settings()
        factory = ComponentFactory(settings)

        creator = factory.get_creator()
        outcome = creator.run(Path.cwd())
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        prompter: BasePrompter | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            settings: Application settings. If None, uses global settings.
            prompter: Prompter shared by every component. A ConsolePrompter
                is created on first use when None.
        """
        self._settings = settings or get_settings()
        self._prompter_cache: BasePrompter | None = prompter
        self._locator_cache: BaseTemplateLocator | None = None
        self._processor_cache: BaseTemplateProcessor | None = None
        self._editor_cache: BaseInteractiveEditor | None = None

    @property
    def settings(self) -> Settings:
        """Settings the factory builds components from."""
        return self._settings

    def get_prompter(self) -> BasePrompter:
        """Get the shared prompter, creating a ConsolePrompter on first use."""
        if self._prompter_cache is None:
            logger.info("Instantiating console prompter")
            self._prompter_cache = ConsolePrompter()
        return self._prompter_cache

    def get_locator(self) -> BaseTemplateLocator:
        """Get the template locator configured by settings.

        Returns:
            A BaseTemplateLocator implementation instance.
        """
        if self._locator_cache is None:
            logger.info("Instantiating file-system template locator")
            self._locator_cache = FileSystemTemplateLocator(
                template_names=self._settings.template_names,
                skip_dirs=self._settings.skip_dirs,
            )
        return self._locator_cache

    def get_processor(self) -> BaseTemplateProcessor:
        """Get the template processor configured by settings.

        Returns:
            A BaseTemplateProcessor implementation instance.
        """
        if self._processor_cache is None:
            logger.info("Instantiating template processor")
            self._processor_cache = TemplateProcessor(
                placeholder_tokens=self._settings.placeholder_tokens,
                case_insensitive=self._settings.placeholder_case_insensitive,
            )
        return self._processor_cache

    def get_editor(self, editor_type: str | None = None) -> BaseInteractiveEditor:
        """Get an editor instance based on the specified type.

        Args:
            editor_type: The editor type to instantiate. If None, uses settings.

        Returns:
            A BaseInteractiveEditor implementation instance.

        Raises:
            ValueError: If the editor type is unknown.
        """
        if self._editor_cache is None or editor_type is not None:
            editor_type = editor_type or self._settings.editor_type

            logger.info(f"Instantiating editor: {editor_type}")

            match editor_type:
                case "prompt":
                    self._editor_cache = PromptLoopEditor(self.get_prompter())
                case "none":
                    self._editor_cache = NullEditor()
                case _:
                    raise ValueError(
                        f"Unknown editor type: {editor_type}. "
                        f"Valid options: 'prompt', 'none'"
                    )

        return self._editor_cache

    def get_ignore_updater(self) -> BaseIgnoreFileUpdater:
        """Create an ignore-rules updater sharing the factory prompter."""
        return GitignoreUpdater(
            self.get_prompter(),
            target_name=self._settings.target_name,
            ignore_file_name=self._settings.ignore_file_name,
        )

    def get_creator(self) -> EnvCreator:
        """Assemble the creation flow from the configured strategies."""
        return EnvCreator(
            locator=self.get_locator(),
            processor=self.get_processor(),
            ignore_updater=self.get_ignore_updater(),
            editor=self.get_editor(),
            prompter=self.get_prompter(),
            target_name=self._settings.target_name,
        )
