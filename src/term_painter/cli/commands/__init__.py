"""CLI command groups for term-painter."""

from term_painter.cli.commands import config, demo

__all__ = ["config", "demo"]
