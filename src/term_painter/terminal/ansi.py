"""ANSI escape sequence driver.

Writes SGR ("select graphic rendition") sequences to a text stream. Palette
colors are encoded with rich's color model, which also downgrades 256-color
indices to the nearest of the 16 standard colors when the terminal only
supports those.
"""

from __future__ import annotations

import sys
from typing import IO

from rich.color import Color as RichColor
from rich.color import ColorSystem
from rich.console import Console

from term_painter.core.errors import TerminalError
from term_painter.core.types import Result
from term_painter.style.flags import TextAttribute

ESCAPE = "\x1b"
RESET_CODE = "0"
MAX_PALETTE_INDEX = 255

_ON_CODES: dict[TextAttribute, str] = {
    TextAttribute.BOLD: "1",
    TextAttribute.DIM: "2",
    TextAttribute.UNDERLINE: "4",
    TextAttribute.BLINK: "5",
    TextAttribute.REVERSE: "7",
    TextAttribute.SECURE: "8",
}
_OFF_CODES: dict[TextAttribute, str] = {
    TextAttribute.UNDERLINE: "24",
}

# rich reports color systems by name
COLOR_SYSTEMS: dict[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


def sgr(*codes: str) -> str:
    """Return the escape sequence for the given SGR parameters."""
    return f"{ESCAPE}[{';'.join(codes)}m"


class AnsiTerminal:
    """Terminal driver emitting ANSI escape sequences.

    Attributes:
        color_system: Palette the terminal supports; colors beyond it are
            downgraded before they are written.
    """

    def __init__(
        self,
        file: IO[str] | None = None,
        color_system: ColorSystem = ColorSystem.EIGHT_BIT,
    ) -> None:
        """Initialize the driver.

        Args:
            file: Stream to write to. Defaults to whatever ``sys.stdout`` is
                at the moment of each write, so redirections made after the
                driver was created are honoured.
            color_system: Palette supported by the terminal.
        """
        self._file = file
        self.color_system = color_system

    @classmethod
    def from_console(cls, console: Console, file: IO[str] | None = None) -> AnsiTerminal | None:
        """Create a driver matching what rich detected for ``console``.

        Returns:
            A driver, or None if the console has no color support at all.
        """
        name = console.color_system
        if name is None:
            return None
        return cls(file, COLOR_SYSTEMS[name])

    @property
    def stream(self) -> IO[str]:
        return sys.stdout if self._file is None else self._file

    def _write(self, operation: str, *codes: str) -> Result[None, TerminalError]:
        try:
            self.stream.write(sgr(*codes))
        except (OSError, ValueError) as e:
            return Result.err(TerminalError.from_exception(e, operation=operation))
        return Result.ok(None)

    def _color(self, color: int, *, foreground: bool) -> Result[None, TerminalError]:
        operation = "fg" if foreground else "bg"
        if not 0 <= color <= MAX_PALETTE_INDEX:
            return Result.err(
                TerminalError(
                    f"Palette index out of range: {color}",
                    operation=operation,
                    details={"color": color},
                )
            )
        rich_color = RichColor.from_ansi(color).downgrade(self.color_system)
        return self._write(operation, *rich_color.get_ansi_codes(foreground=foreground))

    def fg(self, color: int) -> Result[None, TerminalError]:
        return self._color(color, foreground=True)

    def bg(self, color: int) -> Result[None, TerminalError]:
        return self._color(color, foreground=False)

    def attr(self, attribute: TextAttribute, enabled: bool = True) -> Result[None, TerminalError]:
        code = _ON_CODES[attribute] if enabled else _OFF_CODES.get(attribute)
        if code is None:
            return Result.err(
                TerminalError(
                    f"Attribute cannot be switched off individually: {attribute.name.lower()}",
                    operation="attr",
                )
            )
        return self._write("attr", code)

    def reset(self) -> Result[None, TerminalError]:
        return self._write("reset", RESET_CODE)
