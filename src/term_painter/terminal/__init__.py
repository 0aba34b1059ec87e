"""Terminal drivers and per-context terminal state."""

from term_painter.terminal.ansi import AnsiTerminal
from term_painter.terminal.context import (
    PaintContext,
    get_context,
    open_stdout,
    reset_context,
    use_context,
)
from term_painter.terminal.driver import NullTerminal, TerminalDriver
from term_painter.terminal.scope import styled_scope

__all__ = [
    # Drivers
    "TerminalDriver",
    "AnsiTerminal",
    "NullTerminal",
    "open_stdout",
    # Context
    "PaintContext",
    "get_context",
    "use_context",
    "reset_context",
    # Scopes
    "styled_scope",
]
