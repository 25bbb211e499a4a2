"""
Stackwiz CLI - Command-line entry point for the wizard

Usage:
    stackwiz
    stackwiz --version
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console

from stackwiz import __version__
from stackwiz.config import load_config
from stackwiz.errors import PromptCancelled, StackwizError
from stackwiz.logging_utils import configure_logging
from stackwiz.prompts import QuestionaryPrompter
from stackwiz.runner import CommandRunner
from stackwiz.wizard import Wizard

app = typer.Typer(
    name="stackwiz",
    help="Interactively create a Vite project and install a frontend stack",
    add_completion=False,
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"stackwiz {__version__}")
        raise typer.Exit()


@app.command()
def wizard(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Create a Vite project, then pick packages, scaffolding and extras."""
    try:
        config = load_config()
    except (ValidationError, OSError) as e:
        rprint(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    try:
        configure_logging(config.log_level_number, config.log_file)
    except OSError as e:
        rprint(f"[red]Invalid configuration:[/red] cannot open log file {config.log_file}: {e}")
        raise typer.Exit(1)

    try:
        Wizard(
            config=config,
            prompter=QuestionaryPrompter(),
            runner=CommandRunner(),
            console=console,
        ).run()
    except PromptCancelled:
        rprint("[yellow]\n⛔ Prompt canceled. You can run the CLI again anytime![/yellow]")
        raise typer.Exit(0)
    except KeyboardInterrupt:
        rprint("[yellow]\n⛔ CLI interrupted. You can run it again anytime![/yellow]")
        raise typer.Exit(0)
    except StackwizError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
