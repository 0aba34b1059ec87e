"""Painted values: an object bound to the Style it should be printed with.

Terminal colors are control sequences sent to the terminal while text is
written, not data embedded in strings. ``str(painted)`` therefore returns the
plain text of the wrapped object; the style only takes effect when the value
is *written*, via ``Painted.write`` or ``echo``:

    echo("Status:", Color.GREEN.bold().paint("ok"))
    Color.RED.paint(42).write(format_spec="04d")
"""

from __future__ import annotations

from dataclasses import dataclass
import sys
from typing import IO, Any

from term_painter.style.style import Style


@dataclass(frozen=True, slots=True)
class Painted[T]:
    """A value of type T together with a Style.

    Formatting is delegated to the wrapped object unchanged: whatever
    ``format(obj, spec)`` accepts or rejects, ``format(painted, spec)``
    accepts or rejects in the same way and produces the same text.

    Attributes:
        style: The style applied while the value is written.
        obj: The wrapped value.
    """

    style: Style
    obj: T

    def __format__(self, format_spec: str) -> str:
        return format(self.obj, format_spec)

    def __str__(self) -> str:
        return str(self.obj)

    def __repr__(self) -> str:
        return repr(self.obj)

    def write(
        self,
        file: IO[str] | None = None,
        format_spec: str = "",
        *,
        conversion: str | None = None,
    ) -> None:
        """Write the value to ``file`` with the style applied.

        The style is applied, the formatted text written, and the style that
        was active before restored; the restore also happens if formatting
        raises.

        Only the text goes to ``file``. Escape codes go to the driver of the
        current PaintContext (stdout for the default context), so writing to
        a different stream leaves that stream unstyled. Install a context
        whose driver writes to ``file`` to style it:

            with use_context(PaintContext(AnsiTerminal(sys.stderr))):
                Color.RED.paint("error").write(sys.stderr)

        Args:
            file: Output stream. Defaults to ``sys.stdout`` at call time.
            format_spec: Format specification, as in ``format(obj, spec)``.
            conversion: ``"r"`` to write ``repr(obj)`` instead of
                ``format(obj, format_spec)``.
        """
        stream = sys.stdout if file is None else file
        with self.style.scope():
            stream.write(self._render(format_spec, conversion))

    def _render(self, format_spec: str, conversion: str | None) -> str:
        if conversion == "r":
            return format(repr(self.obj), format_spec)
        if conversion not in (None, "s"):
            msg = f"Unknown conversion: {conversion!r}"
            raise ValueError(msg)
        return format(self.obj, format_spec)


def echo(
    *objects: Any,
    sep: str = " ",
    end: str = "\n",
    file: IO[str] | None = None,
    flush: bool = False,
) -> None:
    """Print objects like ``print()``, styling every Painted among them.

    Plain objects are written as ``str(obj)``. Painted objects are written
    through ``Painted.write`` so their style surrounds exactly their own text;
    as there, escape codes go to the driver of the current context, not to
    ``file``.

    Example:
        echo(Color.RED.paint("Red"), "or", Attr.BOLD.paint("Bold"))
    """
    stream = sys.stdout if file is None else file
    for position, obj in enumerate(objects):
        if position:
            stream.write(sep)
        if isinstance(obj, Painted):
            obj.write(stream)
        else:
            stream.write(str(obj))
    stream.write(end)
    if flush:
        stream.flush()
