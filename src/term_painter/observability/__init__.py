"""Observability module for term-painter.

Main components:
- Logging: configure_logging, get_logger, bind_context
"""

from term_painter.observability.logging import (
    LoggingConfig,
    LogMode,
    bind_context,
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    "LogMode",
    "LoggingConfig",
    "bind_context",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
