"""Unit tests for the demo command group."""

import json

import pytest
from typer.testing import CliRunner

from term_painter.cli.main import app

runner = CliRunner()

EXPECTED_STYLES = """\
Red-Green-Bold
Blue
Blue
Blue
Underline
Red or Bold or Both!
JustRed BoldRed Underline BoldRed JustRed Blue (overwrite) Green (overwrite)
"""


@pytest.fixture
def xterm(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend to run under a 256-color xterm."""
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("COLORTERM", raising=False)


class TestStylesCommand:
    def test_plain_output_when_not_a_terminal(self, isolated_home) -> None:
        result = runner.invoke(app, ["demo", "styles"])

        assert result.exit_code == 0
        assert result.stdout == EXPECTED_STYLES

    def test_forced_output_contains_escape_codes(self, isolated_home, xterm) -> None:
        result = runner.invoke(app, ["demo", "styles", "--force"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "\x1b[31m\x1b[42m\x1b[1mRed-Green-Bold\x1b[0m"
        assert lines[4] == "\x1b[4mUnderline\x1b[0m"
        assert "\x1b[31mJustRed" in lines[6]
        assert "\x1b[1mBoldRed \x1b[4mUnderline\x1b[0m\x1b[31m\x1b[1m BoldRed" in lines[6]

    def test_no_color_beats_forced_terminal_setting(
        self, isolated_home, xterm, monkeypatch
    ) -> None:
        monkeypatch.setenv("TERM_PAINTER_FORCE_TERMINAL", "true")
        monkeypatch.setenv("NO_COLOR", "1")

        result = runner.invoke(app, ["demo", "styles"])

        assert result.stdout == EXPECTED_STYLES


class TestPaletteCommand:
    def test_single_row(self, isolated_home) -> None:
        result = runner.invoke(app, ["demo", "palette", "--rows", "1"])

        assert result.exit_code == 0
        fg, bg = result.stdout.splitlines()
        swatches = " ".join(f"{index:<2x}" for index in range(16))
        assert fg == f"FG:  {swatches} "
        assert bg == f"BG:  {swatches} "

    def test_full_palette_has_sixteen_rows(self, isolated_home) -> None:
        result = runner.invoke(app, ["demo", "palette"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 32
        assert lines[-1].startswith("BG:  f0 f1")

    def test_forced_palette_uses_256_colors(self, isolated_home, xterm) -> None:
        result = runner.invoke(app, ["demo", "palette", "-r", "2", "-f"])

        assert result.exit_code == 0
        assert "\x1b[38;5;16m10" in result.stdout
        assert "\x1b[48;5;31m1f" in result.stdout

    def test_rows_out_of_range(self, isolated_home) -> None:
        result = runner.invoke(app, ["demo", "palette", "--rows", "17"])

        assert result.exit_code == 2


class TestForceOption:
    def test_force_survives_invalid_config(self, isolated_home, xterm, monkeypatch) -> None:
        monkeypatch.setenv("TERM_PAINTER_COLOR_SYSTEM", "sixteen-million")

        result = runner.invoke(app, ["demo", "styles", "--force"])

        assert result.exit_code == 0
        assert result.stdout.startswith("\x1b[31m\x1b[42m\x1b[1mRed-Green-Bold")

    def test_configured_force_terminal(self, isolated_home, xterm, monkeypatch) -> None:
        monkeypatch.setenv("TERM_PAINTER_FORCE_TERMINAL", "yes")

        result = runner.invoke(app, ["demo", "styles"])

        assert "\x1b[34mBlue\x1b[0m" in result.stdout


class TestDemoLogging:
    def test_log_events_carry_command_name(self, isolated_home, monkeypatch) -> None:
        monkeypatch.setenv("TERM_PAINTER_LOG_MODE", "prod")
        monkeypatch.setenv("TERM_PAINTER_LOG_LEVEL", "debug")

        result = runner.invoke(app, ["demo", "styles"])

        assert result.exit_code == 0
        events = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        unavailable = [e for e in events if e["event"] == "terminal.open.unavailable"]
        assert unavailable
        assert unavailable[0]["command"] == "demo"
        assert unavailable[0]["reason"] == "not a terminal"
