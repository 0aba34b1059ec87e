"""Scoped style execution.

Entering a scope applies a style on top of whatever is active and records
the merged style as the new active one. Leaving the scope (normally or
through an exception) resets the terminal and re-applies the style that was
active before. Each scope keeps its "before" style as a local variable, so
nesting depth only depends on the call stack:

    outer = Color.RED          active: red
      inner = Attr.BOLD        active: red + bold
      back in outer            active: red
    back outside               active: default

Driver failures are logged and ignored: styling is cosmetic and must never
keep the wrapped work from running or its output from appearing.
"""

from __future__ import annotations

from collections.abc import Iterator
import contextlib

from term_painter.core.errors import TerminalError
from term_painter.core.types import Result
from term_painter.observability.logging import get_logger
from term_painter.style.style import Style
from term_painter.terminal.context import PaintContext, get_context


def _log_failure(event: str, result: Result[None, TerminalError]) -> None:
    if result.is_err:
        get_logger(__name__).debug(
            event,
            operation=result.error.operation,
            error=str(result.error),
        )


@contextlib.contextmanager
def styled_scope(style: Style, context: PaintContext | None = None) -> Iterator[Style]:
    """Apply ``style`` for the duration of the block, then restore.

    Args:
        style: The style to layer over the active one.
        context: Context to track state in. Defaults to ``get_context()``.

    Yields:
        The merged style that is active inside the block.
    """
    if context is None:
        context = get_context()

    before = context.current
    terminal = context.terminal

    _log_failure("style.apply.failed", style.apply(terminal))
    context.current = before & style
    try:
        yield context.current
    finally:
        _log_failure("style.revert.failed", before.revert_to(terminal))
        context.current = before
