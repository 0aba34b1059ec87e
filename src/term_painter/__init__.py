"""term-painter - Composable styles for terminal output.

Styles are built from a starting point (a color, an attribute, or a plain
style) and modifiers, then used to paint values or to wrap code that prints:

    from term_painter import Attr, Color, echo

    echo(Color.RED.paint("Red"), "or", Attr.BOLD.paint("Bold"))
    echo(Attr.PLAIN.fg(Color.RED).fg(Color.BLUE).paint("blue, not red"))

    with Color.RED.scope():
        echo("red")
        with Attr.BOLD.scope():
            echo("red and bold")
        echo("red again")

Colors are terminal control sequences, not part of the text: ``str()`` and
``format()`` of a painted value return its plain text. Styling is best
effort; when stdout is not a terminal the output is simply unstyled.

Example:
    # Using CLI
    term-painter demo styles
    term-painter demo palette --rows 4
"""

from term_painter.style import (
    Attr,
    AttributeFlag,
    AttributeSet,
    Color,
    Painted,
    Style,
    StyleSource,
    TextAttribute,
    echo,
)
from term_painter.terminal import (
    AnsiTerminal,
    NullTerminal,
    PaintContext,
    TerminalDriver,
    get_context,
    use_context,
)

__version__ = "0.4.0"

__all__ = [
    "__version__",
    "main",
    # Styles
    "Attr",
    "AttributeFlag",
    "AttributeSet",
    "Color",
    "Painted",
    "Style",
    "StyleSource",
    "TextAttribute",
    "echo",
    # Terminal
    "AnsiTerminal",
    "NullTerminal",
    "PaintContext",
    "TerminalDriver",
    "get_context",
    "use_context",
]


def main() -> None:
    """Main entry point for the term-painter CLI.

    This function invokes the Typer app from term_painter.cli.main.
    """
    from term_painter.cli.main import app

    app()
