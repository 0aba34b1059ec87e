"""Per-context terminal state.

The real terminal cannot be asked which colors are active, so the library
tracks what it believes is active: the style of the innermost open scope.
That belief, together with the terminal handle, lives in a PaintContext.

Contexts are stored in a ContextVar. A new thread starts without one and
creates its own on first use, so threads never share a handle. The active
style of a context is itself kept in a ContextVar: asyncio tasks share
their creator's PaintContext and driver, but a scope entered inside a task
only changes the active style seen by that task.

Two contexts writing to the same physical terminal at once is not
coordinated; callers that do this must synchronise themselves.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import contextlib
from contextvars import ContextVar
import sys

from rich.console import Console

from term_painter.config.loader import load_config
from term_painter.config.models import PainterConfig
from term_painter.core.errors import ConfigError
from term_painter.observability.logging import get_logger
from term_painter.style.style import Style
from term_painter.terminal.ansi import AnsiTerminal
from term_painter.terminal.driver import TerminalDriver

type TerminalOpener = Callable[[], TerminalDriver | None]

_current_context: ContextVar[PaintContext | None] = ContextVar(
    "term_painter_context", default=None
)


def open_stdout(config: PainterConfig | None = None) -> TerminalDriver | None:
    """Acquire a driver for the standard output terminal.

    Args:
        config: Configuration to honour. Loaded with ``load_config()`` when
            omitted; an invalid configuration is logged and replaced by the
            defaults, since styling problems must not stop the program.

    Returns:
        An AnsiTerminal, or None when styling is disabled, stdout is not a
        terminal (unless forced), or no color support was detected.
    """
    log = get_logger(__name__)

    if config is None:
        try:
            config = load_config()
        except ConfigError as e:
            log.warning("terminal.config.invalid", error=str(e))
            config = PainterConfig()

    if not config.enabled:
        log.debug("terminal.open.unavailable", reason="disabled")
        return None

    console = Console(
        file=sys.stdout,
        force_terminal=config.force_terminal,
        color_system=config.color_system,
    )
    if not console.is_terminal:
        log.debug("terminal.open.unavailable", reason="not a terminal")
        return None

    terminal = AnsiTerminal.from_console(console)
    if terminal is None:
        log.debug("terminal.open.unavailable", reason="no color support")
        return None

    log.debug("terminal.open.acquired", color_system=console.color_system)
    return terminal


class PaintContext:
    """Terminal handle and active style of one execution context.

    The terminal is acquired lazily, at most once, and never released.
    """

    def __init__(
        self,
        terminal: TerminalDriver | None = None,
        *,
        opener: TerminalOpener | None = None,
    ) -> None:
        """Create a context.

        Args:
            terminal: Driver to use. When given, no opener is called.
            opener: Called once, on first use, to acquire the driver; may
                return None for "no terminal". Defaults to ``open_stdout``.
        """
        self._terminal = terminal
        self._opener: TerminalOpener = opener or open_stdout
        self._acquired = terminal is not None
        self._current: ContextVar[Style] = ContextVar(
            f"term_painter_current_{id(self):x}", default=Style()
        )

    @property
    def terminal(self) -> TerminalDriver | None:
        """The driver of this context, or None if no terminal is available."""
        if not self._acquired:
            self._terminal = self._opener()
            self._acquired = True
        return self._terminal

    @property
    def current(self) -> Style:
        """The style believed to be active, as seen by the calling thread or task."""
        return self._current.get()

    @current.setter
    def current(self, style: Style) -> None:
        self._current.set(style)

    @property
    def acquired(self) -> bool:
        return self._acquired

    def __repr__(self) -> str:
        return f"PaintContext(terminal={self._terminal!r}, current={self.current!r})"


def get_context() -> PaintContext:
    """Return the context of the caller, creating it on first use."""
    context = _current_context.get()
    if context is None:
        context = PaintContext()
        _current_context.set(context)
    return context


@contextlib.contextmanager
def use_context(context: PaintContext) -> Iterator[PaintContext]:
    """Make ``context`` the active context for the duration of the block.

    Example:
        with use_context(PaintContext(NullTerminal())):
            echo(Color.RED.paint("not colored"))
    """
    token = _current_context.set(context)
    try:
        yield context
    finally:
        _current_context.reset(token)


def reset_context() -> None:
    """Forget the context of the caller; the next use creates a fresh one."""
    _current_context.set(None)
