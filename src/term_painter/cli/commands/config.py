"""Config command group.

Inspect and initialise the term-painter configuration.
"""

from pathlib import Path
from typing import Annotated

import typer

from term_painter.cli.formatters import console
from term_painter.cli.formatters.tables import create_key_value_table, print_table
from term_painter.config.loader import load_config, write_default_config
from term_painter.core.errors import ConfigError

app = typer.Typer(
    name="config",
    help="Manage term-painter configuration.",
    no_args_is_help=True,
)

ConfigPathOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Configuration file (default: ~/.config/term-painter/config.yaml).",
    ),
]


@app.command()
def show(config_path: ConfigPathOption = None) -> None:
    """Display the effective configuration after environment overrides."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[error]{e.message}[/]")
        raise typer.Exit(1) from e

    data = {
        "enabled": config.enabled,
        "force_terminal": config.force_terminal,
        "color_system": config.color_system,
        "logging.mode": config.logging.mode.value,
        "logging.log_level": config.logging.log_level,
    }
    print_table(create_key_value_table(data, "Effective Configuration"))


@app.command()
def init(
    config_path: ConfigPathOption = None,
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Replace an existing configuration file."),
    ] = False,
) -> None:
    """Write a configuration file with default values."""
    try:
        path = write_default_config(config_path, overwrite=overwrite)
    except ConfigError as e:
        console.print(f"[warning]{e.message}[/]")
        raise typer.Exit(1) from e

    console.print(f"[success]Wrote default configuration to[/] {path}")


__all__ = ["app"]
