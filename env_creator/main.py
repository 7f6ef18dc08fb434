"""Command line entry point.

``env-creator create`` copies a template into ``.env`` and walks the user
through its placeholders; ``env-creator templates`` only lists what would
be offered.
"""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from env_creator import __version__
from env_creator.core.config import Settings
from env_creator.core.factory import ComponentFactory
from env_creator.core.logging_config import setup_logging

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    name="env-creator",
    help="Create a .env file from a template such as .env.example.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    """Print the version and exit when --version is given."""
    if value:
        console.print(f"env-creator {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    log_level: str = typer.Option(None, "--log-level", help="Override the configured log level (DEBUG, INFO, WARNING, ERROR)"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
):
    """Create a .env file from a template such as .env.example."""
    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    setup_logging(settings)
    ctx.obj = ComponentFactory(settings)


@app.command()
def create(
    ctx: typer.Context,
    root: Path = typer.Argument(None, help="Workspace root to search (defaults to the current directory)"),
):
    """Copy a template to .env and fill its placeholders."""
    factory: ComponentFactory = ctx.obj
    workspace_root = root if root is not None else Path.cwd()

    outcome = factory.get_creator().run(workspace_root)
    logger.info(f"Run finished: {outcome.value}")

    if outcome.is_failure:
        raise typer.Exit(1)


@app.command("templates")
def list_templates(
    ctx: typer.Context,
    root: Path = typer.Argument(None, help="Workspace root to search (defaults to the current directory)"),
):
    """List the templates found under the workspace root."""
    factory: ComponentFactory = ctx.obj
    workspace_root = root if root is not None else Path.cwd()

    if not workspace_root.is_dir():
        console.print(f"[red]No workspace folder open: {escape(str(workspace_root))} is not a directory[/red]")
        raise typer.Exit(1)

    templates = factory.get_locator().find_templates(workspace_root)
    if not templates:
        console.print("[yellow]No .env template files found[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Templates", title_justify="left", border_style="cyan")
    table.add_column("Template", style="bold")
    table.add_column("Location", style="dim")
    for template in templates:
        table.add_row(escape(template.name), escape(template.relative_path))
    console.print(table)


def main() -> None:
    """Run the env-creator command line."""
    app()


if __name__ == "__main__":
    main()
