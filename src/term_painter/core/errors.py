"""Error hierarchy for term-painter.

Exception Hierarchy:
    PainterError (base)
    ├── TerminalError  - a terminal state operation failed
    └── ConfigError    - configuration file or value problems

TerminalError is normally not raised: driver calls return it inside a
``Result`` and the scoped-styling layer logs and discards it, because a
failure to color the terminal must never suppress the output itself.
"""

from __future__ import annotations

from typing import Any


class PainterError(Exception):
    """Base exception for all term-painter errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class TerminalError(PainterError):
    """A terminal state operation failed.

    Covers both a missing terminal handle and an individual driver call
    (setting a color, an attribute, or resetting) that could not be carried
    out.

    Attributes:
        operation: The driver operation that failed ("open", "fg", "bg",
            "attr" or "reset").
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation

    @classmethod
    def from_exception(cls, exc: Exception, *, operation: str) -> TerminalError:
        """Wrap a low-level I/O exception raised while writing to the terminal.

        Args:
            exc: The original exception (usually OSError or ValueError from a
                closed stream).
            operation: The driver operation that was running.

        Returns:
            A TerminalError with ``__cause__`` set to the original exception.
        """
        error = cls(
            str(exc) or type(exc).__name__,
            operation=operation,
            details={"original_exception": type(exc).__name__},
        )
        error.__cause__ = exc
        return error


class ConfigError(PainterError):
    """Error from configuration loading or validation.

    Attributes:
        config_key: The configuration key that caused the error.
        config_file: Path to the config file if applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        config_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.config_key = config_key
        self.config_file = config_file
