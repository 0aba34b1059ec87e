"""Terminal driver protocol.

A driver is the thin layer that turns "set the foreground to palette entry
1" into whatever the terminal understands. Styles only talk to drivers
through this protocol, which keeps the composition logic independent of the
output technology and lets tests substitute a recording driver.

Every operation returns a Result instead of raising: failing to color the
terminal is an expected condition, not a bug.
"""

from typing import Protocol

from term_painter.core.errors import TerminalError
from term_painter.core.types import Result
from term_painter.style.flags import TextAttribute


class TerminalDriver(Protocol):
    """Operations a terminal must support for styles to be applied."""

    def fg(self, color: int) -> Result[None, TerminalError]:
        """Set the foreground color to a palette index."""
        ...

    def bg(self, color: int) -> Result[None, TerminalError]:
        """Set the background color to a palette index."""
        ...

    def attr(self, attribute: TextAttribute, enabled: bool = True) -> Result[None, TerminalError]:
        """Switch a text attribute on.

        ``enabled=False`` is only ever passed for attributes whose
        ``switchable`` property is True.
        """
        ...

    def reset(self) -> Result[None, TerminalError]:
        """Return the terminal to its default colors and attributes."""
        ...


class NullTerminal:
    """A driver that accepts every call and does nothing.

    Useful when output should be unstyled but the calling code still
    expects a working terminal, e.g. when writing to a file.
    """

    def fg(self, color: int) -> Result[None, TerminalError]:
        return Result.ok(None)

    def bg(self, color: int) -> Result[None, TerminalError]:
        return Result.ok(None)

    def attr(self, attribute: TextAttribute, enabled: bool = True) -> Result[None, TerminalError]:
        return Result.ok(None)

    def reset(self) -> Result[None, TerminalError]:
        return Result.ok(None)
