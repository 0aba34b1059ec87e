"""term-painter command-line interface."""

from term_painter.cli.main import app

__all__ = ["app"]
