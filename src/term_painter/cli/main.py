"""term-painter CLI main entry point.

This module defines the main Typer application and registers
all command groups.
"""

from typing import Annotated

import typer

from term_painter import __version__
from term_painter.cli.commands import config, demo
from term_painter.cli.formatters import console
from term_painter.config.loader import load_config
from term_painter.core.errors import ConfigError
from term_painter.observability.logging import bind_context, configure_logging

app = typer.Typer(
    name="term-painter",
    help="term-painter - Composable styles for terminal output",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(demo.app, name="demo")
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]term-painter[/] version [green]{__version__}[/]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """term-painter - Composable styles for terminal output.

    Use [bold cyan]term-painter COMMAND --help[/] for command-specific help.
    """
    try:
        configure_logging(load_config().logging)
    except ConfigError:
        # Reported by the command that reads the configuration
        configure_logging()
    bind_context(command=ctx.invoked_subcommand)


__all__ = ["app", "main"]
