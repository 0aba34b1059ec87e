"""Unit tests for the ANSI escape sequence driver."""

import io
import re

import pytest
from rich.color import ColorSystem
from rich.console import Console

from term_painter.style import TextAttribute
from term_painter.terminal.ansi import MAX_PALETTE_INDEX, AnsiTerminal, sgr


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


class TestSgr:
    def test_sgr_joins_codes(self) -> None:
        assert sgr("0") == "\x1b[0m"
        assert sgr("38", "5", "208") == "\x1b[38;5;208m"


class TestAnsiColors:
    """Test palette colors on different color systems."""

    @pytest.mark.parametrize(
        ("index", "fg", "bg"),
        [(0, "30", "40"), (1, "31", "41"), (7, "37", "47"), (9, "91", "101"), (15, "97", "107")],
    )
    def test_standard_colors(self, buffer, index: int, fg: str, bg: str) -> None:
        terminal = AnsiTerminal(buffer)

        assert terminal.fg(index).is_ok
        assert terminal.bg(index).is_ok
        assert buffer.getvalue() == sgr(fg) + sgr(bg)

    def test_eight_bit_color(self, buffer) -> None:
        terminal = AnsiTerminal(buffer)

        terminal.fg(208)
        terminal.bg(17)

        assert buffer.getvalue() == "\x1b[38;5;208m\x1b[48;5;17m"

    def test_eight_bit_color_downgraded_on_standard_terminal(self, buffer) -> None:
        terminal = AnsiTerminal(buffer, ColorSystem.STANDARD)

        assert terminal.fg(196).is_ok

        assert re.fullmatch(r"\x1b\[(3[0-7]|9[0-7])m", buffer.getvalue())

    @pytest.mark.parametrize("index", [-1, MAX_PALETTE_INDEX + 1, 1000])
    def test_out_of_range_index_fails(self, buffer, index: int) -> None:
        result = AnsiTerminal(buffer).fg(index)

        assert result.is_err
        assert result.error.operation == "fg"
        assert result.error.details == {"color": index}
        assert buffer.getvalue() == ""


class TestAnsiAttributes:
    @pytest.mark.parametrize(
        ("attribute", "code"),
        [
            (TextAttribute.BOLD, "1"),
            (TextAttribute.DIM, "2"),
            (TextAttribute.UNDERLINE, "4"),
            (TextAttribute.BLINK, "5"),
            (TextAttribute.REVERSE, "7"),
            (TextAttribute.SECURE, "8"),
        ],
    )
    def test_attribute_on(self, buffer, attribute: TextAttribute, code: str) -> None:
        assert AnsiTerminal(buffer).attr(attribute).is_ok
        assert buffer.getvalue() == sgr(code)

    def test_underline_off(self, buffer) -> None:
        assert AnsiTerminal(buffer).attr(TextAttribute.UNDERLINE, enabled=False).is_ok
        assert buffer.getvalue() == "\x1b[24m"

    def test_bold_cannot_be_switched_off(self, buffer) -> None:
        result = AnsiTerminal(buffer).attr(TextAttribute.BOLD, enabled=False)

        assert result.is_err
        assert result.error.operation == "attr"
        assert buffer.getvalue() == ""

    def test_reset(self, buffer) -> None:
        assert AnsiTerminal(buffer).reset().is_ok
        assert buffer.getvalue() == "\x1b[0m"


class TestAnsiStream:
    """Test stream handling and write failures."""

    def test_closed_stream_reports_error(self) -> None:
        stream = io.StringIO()
        stream.close()

        result = AnsiTerminal(stream).reset()

        assert result.is_err
        assert result.error.operation == "reset"
        assert isinstance(result.error.__cause__, ValueError)

    def test_default_stream_follows_stdout(self, capsys) -> None:
        terminal = AnsiTerminal()

        terminal.fg(2)

        assert capsys.readouterr().out == "\x1b[32m"


class TestFromConsole:
    """Test creating a driver from what rich detected."""

    def test_uses_console_color_system(self, buffer) -> None:
        console = Console(file=buffer, force_terminal=True, color_system="standard")

        terminal = AnsiTerminal.from_console(console, buffer)

        assert terminal is not None
        assert terminal.color_system == ColorSystem.STANDARD
        assert terminal.stream is buffer

    def test_no_color_support_returns_none(self, buffer) -> None:
        console = Console(file=buffer, color_system=None)

        assert AnsiTerminal.from_console(console) is None
