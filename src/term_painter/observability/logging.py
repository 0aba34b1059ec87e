"""Structured logging configuration for term-painter.

This module configures structlog for the library. Styling failures are
never raised to the caller, so logging is the only place they become
visible. Output always goes to stderr, so log lines never interleave with
the styled text written to stdout.

Two output modes:
- dev: human-readable console renderer
- prod: one JSON object per line

Event naming convention:
- Use dot.notation (e.g., "terminal.open.acquired", "style.apply.failed")
- Format: domain.entity.verb_past_tense

Usage:
    from term_painter.observability import configure_logging, get_logger

    configure_logging(LoggingConfig(mode=LogMode.DEV, log_level="DEBUG"))

    log = get_logger()
    log.debug("style.apply.failed", operation="fg", error="closed stream")
"""

from __future__ import annotations

from enum import Enum
import logging
import os
import sys
from typing import Any

from pydantic import BaseModel, Field
import structlog


class LogMode(str, Enum):
    """Logging output mode."""

    DEV = "dev"
    PROD = "prod"


class LoggingConfig(BaseModel):
    """Configuration for structured logging.

    Attributes:
        mode: Output mode (dev for human-readable, prod for JSON).
        log_level: Minimum log level to output. A library should stay quiet
            by default, so only warnings and above are shown.
    """

    mode: LogMode = Field(default=LogMode.DEV)
    log_level: str = Field(default="WARNING")

    model_config = {"frozen": True}


# Module-level state for tracking configuration
_configured: bool = False


def _get_mode_from_env() -> LogMode:
    """Return the mode named by TERM_PAINTER_LOG_MODE, defaulting to DEV."""
    env_mode = os.environ.get("TERM_PAINTER_LOG_MODE", "dev").lower()
    if env_mode == "prod":
        return LogMode.PROD
    return LogMode.DEV


def _get_log_level(level_str: str) -> int:
    """Convert log level string to logging constant.

    Args:
        level_str: Log level as string (e.g., "INFO", "DEBUG").

    Returns:
        Logging constant (e.g., logging.INFO). Unknown names map to WARNING.
    """
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_str.upper(), logging.WARNING)


def _get_processors(mode: LogMode) -> list[Any]:
    """Get the processor chain for the given mode.

    Returns:
        List of structlog processors ending in a renderer.
    """
    processors: list[Any] = [
        # Merge contextvars into event dict (per thread / task)
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if mode == LogMode.DEV:
        # No colors: the renderer would write escape codes to stderr while a
        # styled scope may be active on stdout of the same terminal.
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())

    return processors


class _StderrLogger:
    """Print logger bound to whatever ``sys.stderr`` is at write time.

    structlog's PrintLogger captures its stream once; looking it up per
    message keeps logging working when stderr is swapped later (test
    runners, CLI runners, redirections).
    """

    def msg(self, message: str) -> None:
        print(message, file=sys.stderr)

    def __call__(self, message: str) -> None:
        self.msg(message)

    debug = info = warning = warn = error = critical = fatal = exception = msg


class _StderrLoggerFactory:
    """Factory for creating stderr loggers."""

    def __call__(self, *_args: Any) -> _StderrLogger:
        """Create a new logger instance.

        Args:
            *_args: Ignored arguments (structlog may pass logger name).
        """
        return _StderrLogger()


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog for the library.

    Args:
        config: Logging configuration. If None, uses defaults with the mode
            taken from the TERM_PAINTER_LOG_MODE environment variable.

    Example:
        configure_logging(LoggingConfig(mode=LogMode.PROD, log_level="DEBUG"))
    """
    global _configured

    if config is None:
        config = LoggingConfig(mode=_get_mode_from_env())

    structlog.configure(
        processors=_get_processors(config.mode),
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(config.log_level)),
        context_class=dict,
        logger_factory=_StderrLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _configured = True


def get_logger(name: str | None = None) -> Any:
    """Get a bound logger instance.

    If neither this module nor the host application has configured
    structlog, this configures it with defaults first. A host application's
    own structlog configuration is left untouched.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    if not is_configured() and not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in every following log entry.

    Example:
        bind_context(command="demo")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def is_configured() -> bool:
    """Return True once configure_logging has been called."""
    return _configured


def reset_logging() -> None:
    """Reset logging configuration state.

    This is primarily for testing purposes.
    """
    global _configured
    _configured = False
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
