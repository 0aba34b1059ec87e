"""Demo command group.

Prints sample output so the styling capabilities of a terminal can be
checked at a glance.
"""

from collections.abc import Iterator
import contextlib
from functools import partial
from typing import Annotated

import typer

from term_painter.config.loader import load_config
from term_painter.config.models import PainterConfig
from term_painter.core.errors import ConfigError
from term_painter.style import Attr, Color, echo
from term_painter.terminal.context import (
    PaintContext,
    TerminalOpener,
    open_stdout,
    use_context,
)

app = typer.Typer(
    name="demo",
    help="Show what term-painter styles look like on this terminal.",
    no_args_is_help=True,
)

PALETTE_COLUMNS = 16

ForceOption = Annotated[
    bool,
    typer.Option(
        "--force",
        "-f",
        help="Emit escape codes even when stdout is not a terminal.",
    ),
]


def _opener(force: bool) -> TerminalOpener:
    if not force:
        return open_stdout
    try:
        config = load_config()
    except ConfigError:
        config = PainterConfig()
    return partial(
        open_stdout,
        config.model_copy(update={"enabled": True, "force_terminal": True}),
    )


@contextlib.contextmanager
def _demo_context(force: bool) -> Iterator[None]:
    """Run the block in a fresh terminal context, optionally forced on."""
    with use_context(PaintContext(opener=_opener(force))):
        yield


def _nested_scopes() -> None:
    echo("JustRed", end=" ")
    Attr.BOLD.with_(echo, "BoldRed", Attr.UNDERLINE.paint("Underline"), "BoldRed", end=" ")
    echo("JustRed", end=" ")
    echo(Color.BLUE.paint("Blue (overwrite)"), end=" ")
    Color.GREEN.with_(echo, "Green (overwrite)")


@app.command()
def styles(force: ForceOption = False) -> None:
    """Print a few combinations of colors and attributes."""
    with _demo_context(force):
        echo(Color.RED.bg(Color.GREEN).bold().paint("Red-Green-Bold"))
        echo(Color.BLUE.paint("Blue"))
        echo(Color.BLUE.bold().paint("Blue"))
        echo(Color.BLUE.bg(Color.MAGENTA).paint("Blue"))
        echo(Attr.PLAIN.underline().paint("Underline"))
        echo(
            Color.RED.paint("Red"),
            "or",
            Attr.BOLD.paint("Bold"),
            "or",
            Color.RED.bold().paint("Both!"),
        )
        Color.RED.with_(_nested_scopes)


@app.command()
def palette(
    rows: Annotated[
        int,
        typer.Option("--rows", "-r", min=1, max=16, help="Number of 16-color rows to show."),
    ] = 16,
    force: ForceOption = False,
) -> None:
    """Print the 256-color palette as foreground and background swatches."""
    with _demo_context(force):
        for line in range(rows):
            indices = range(PALETTE_COLUMNS * line, PALETTE_COLUMNS * (line + 1))

            echo("FG:  ", end="")
            for index in indices:
                Color.custom(index).paint(index).write(format_spec="<2x")
                echo(end=" ")
            echo()

            echo("BG:  ", end="")
            for index in indices:
                Attr.PLAIN.bg(Color.custom(index)).paint(index).write(format_spec="<2x")
                echo(end=" ")
            echo()


__all__ = ["app"]
