"""Terminal prompter built on rich.

Ctrl-C and end of input dismiss a prompt; dismissal is reported to the
caller as ``None``.
"""

import logging

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from env_creator.interfaces.prompter import BasePrompter, PickItem

logger = logging.getLogger(__name__)


class ConsolePrompter(BasePrompter):
    """Asks questions and shows messages on a rich Console."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the prompter.

        Args:
            console: Console to use. A default stdout console when None.
        """
        self._console = console or Console()

    def pick(self, items: list[PickItem], placeholder: str) -> int | None:
        """Show the items as a numbered table and ask for a number.

        Args:
            items: Entries to choose from.
            placeholder: Table title.

        Returns:
            Zero-based index of the chosen item, or None when dismissed.
        """
        table = Table(title=placeholder, title_justify="left", border_style="cyan")
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Template", style="bold")
        table.add_column("Location", style="dim")
        for number, item in enumerate(items, start=1):
            table.add_row(str(number), escape(item.label), escape(item.description))

        self._console.print()
        self._console.print(table)

        answer = self._ask(
            "Number",
            choices=[str(number) for number in range(1, len(items) + 1)],
        )
        if answer is None:
            return None
        return int(answer) - 1

    def info(self, message: str, *choices: str) -> str | None:
        """Print a green message and optionally ask for one of ``choices``."""
        return self._show(message, "green", choices)

    def warning(self, message: str, *choices: str) -> str | None:
        """Print a yellow message and optionally ask for one of ``choices``."""
        return self._show(message, "yellow", choices)

    def error(self, message: str) -> None:
        """Print a red message."""
        self._console.print(f"[red]{escape(message)}[/red]")

    def ask(self, message: str, default: str = "") -> str | None:
        """Ask for free text. An empty answer accepts ``default``."""
        return self._ask(escape(message), default=default)

    def _show(self, message: str, style: str, choices: tuple[str, ...]) -> str | None:
        """Print ``message`` in ``style`` and ask for a choice if any are given."""
        self._console.print(f"[{style}]{escape(message)}[/{style}]")
        if not choices:
            return None
        return self._ask("Choose", choices=list(choices))

    def _ask(
        self,
        prompt: str,
        choices: list[str] | None = None,
        default: str | None = None,
    ) -> str | None:
        """Run a rich prompt.

        Args:
            prompt: Prompt text, already escaped for markup.
            choices: Allowed answers. Any text when None.
            default: Answer used for empty input.

        Returns:
            The answer, or None on Ctrl-C or end of input.
        """
        kwargs = {"choices": choices, "console": self._console}
        if default is not None:
            kwargs["default"] = default
        try:
            return Prompt.ask(prompt, **kwargs)
        except (EOFError, KeyboardInterrupt):
            self._console.print()
            logger.info("Prompt dismissed")
            return None
