"""term-painter core module - shared result type and errors."""

from term_painter.core.errors import ConfigError, PainterError, TerminalError
from term_painter.core.types import Result

__all__ = [
    # Types
    "Result",
    # Errors
    "PainterError",
    "TerminalError",
    "ConfigError",
]
