"""Shared fixtures for term-painter tests."""

from collections.abc import Iterator
from typing import Any

import pytest

from term_painter.core.errors import TerminalError
from term_painter.core.types import Result
from term_painter.observability.logging import reset_logging
from term_painter.style.flags import TextAttribute
from term_painter.terminal.context import PaintContext, reset_context, use_context


class RecordingTerminal:
    """Driver that records every call instead of touching a terminal.

    Calls whose operation name is in ``fail_on`` are recorded and then
    reported as failed.
    """

    def __init__(self, fail_on: frozenset[str] = frozenset()) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.fail_on = fail_on

    def _record(self, *call: Any) -> Result[None, TerminalError]:
        self.calls.append(call)
        operation = call[0]
        if operation in self.fail_on:
            return Result.err(TerminalError(f"{operation} failed", operation=operation))
        return Result.ok(None)

    def fg(self, color: int) -> Result[None, TerminalError]:
        return self._record("fg", color)

    def bg(self, color: int) -> Result[None, TerminalError]:
        return self._record("bg", color)

    def attr(self, attribute: TextAttribute, enabled: bool = True) -> Result[None, TerminalError]:
        return self._record("attr", attribute, enabled)

    def reset(self) -> Result[None, TerminalError]:
        return self._record("reset")


@pytest.fixture(autouse=True)
def _isolate_state() -> Iterator[None]:
    """Give every test a fresh paint context and unconfigured logging."""
    reset_context()
    reset_logging()
    yield
    reset_context()
    reset_logging()


@pytest.fixture(autouse=True)
def _plain_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that change terminal detection."""
    for name in (
        "NO_COLOR",
        "FORCE_COLOR",
        "TTY_COMPATIBLE",
        "TERM_PAINTER_ENABLED",
        "TERM_PAINTER_FORCE_TERMINAL",
        "TERM_PAINTER_COLOR_SYSTEM",
        "TERM_PAINTER_LOG_MODE",
        "TERM_PAINTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point the home directory at a temporary path."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def recorder() -> RecordingTerminal:
    """Create a recording driver that never fails."""
    return RecordingTerminal()


@pytest.fixture
def make_recorder():
    """Create recording drivers that fail on the given operations."""

    def _make(*fail_on: str) -> RecordingTerminal:
        return RecordingTerminal(frozenset(fail_on))

    return _make


@pytest.fixture
def paint_context(recorder: RecordingTerminal) -> Iterator[PaintContext]:
    """Install a context backed by the recording driver."""
    with use_context(PaintContext(recorder)) as context:
        yield context
