"""Prompt-per-field editor.

Terminals have no snippet engine, so each tab stop is filled through its
own prompt, in index order, pre-filled with the template's value. The
filled snippet then replaces the plain copy on disk.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

import click

from env_creator.interfaces.editor import BaseInteractiveEditor
from env_creator.interfaces.errors import EnvFileWriteError, InteractiveFillError
from env_creator.interfaces.prompter import BasePrompter
from env_creator.interfaces.template import PlaceholderMarker
from env_creator.strategies.template_engine.snippet import render_snippet
from env_creator.utils.files import write_text

logger = logging.getLogger(__name__)


class PromptLoopEditor(BaseInteractiveEditor):
    """Fills tab stops with one prompt per placeholder.

    Dismissing a prompt stops the loop; that stop and every later one keep
    their default text.
    """

    def __init__(self, prompter: BasePrompter) -> None:
        """Initialize the editor.

        Args:
            prompter: Used to ask for each value.
        """
        self._prompter = prompter

    def open(self, path: Path) -> None:
        """Open ``path`` in the user's $EDITOR (or the platform default)."""
        logger.info(f"Opening {path} in editor")
        try:
            click.edit(filename=str(path))
        except click.ClickException as e:
            raise InteractiveFillError(f"Could not open {path}: {e.format_message()}") from e

    def insert_interactive_template(
        self,
        target: Path,
        snippet: str,
        stops: Sequence[PlaceholderMarker],
    ) -> None:
        """Ask for each stop in order and write the filled snippet to ``target``.

        Args:
            target: File holding the plain copy.
            snippet: Template text annotated with tab stops.
            stops: Stops to fill, in index order.

        Raises:
            InteractiveFillError: If the filled text cannot be written.
        """
        values: dict[int, str] = {}
        total = len(stops)

        for stop in stops:
            answer = self._prompter.ask(f"[{stop.index}/{total}] {stop.key}", default=stop.default)
            if answer is None:
                logger.info(f"Interactive fill stopped at stop {stop.index} of {total}")
                break
            values[stop.index] = answer

        try:
            write_text(target, render_snippet(snippet, stops, values))
        except EnvFileWriteError as e:
            raise InteractiveFillError(f"Could not save filled values: {e}") from e

        logger.info(f"Filled {len(values)} of {total} placeholder(s) in {target}")
