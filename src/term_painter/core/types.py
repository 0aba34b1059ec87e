"""Core types for term-painter - the Result type.

Terminal operations can fail for reasons outside the caller's control (no
terminal attached, a closed stream, an unsupported palette index). Those
expected failures travel as ``Result`` values instead of exceptions, so the
styling layer can decide to ignore them without try/except noise.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import cast


@dataclass(frozen=True, slots=True)
class Result[T, E]:
    """Either a success (Ok) carrying a value or a failure (Err) carrying an error.

    Usage:
        result = terminal.fg(1)
        if result.is_err:
            log.debug("style.apply.failed", error=str(result.error))

        # Chain driver calls, stopping at the first failure
        result = terminal.reset().and_then(lambda _: style.apply(terminal))
    """

    _value: T | None
    _error: E | None
    _is_ok: bool

    @classmethod
    def ok(cls, value: T) -> Result[T, E]:
        """Create a successful Result containing the given value."""
        return cls(_value=value, _error=None, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> Result[T, E]:
        """Create a failed Result containing the given error."""
        return cls(_value=None, _error=error, _is_ok=False)

    @property
    def is_ok(self) -> bool:
        """Return True if this Result is Ok (success)."""
        return self._is_ok

    @property
    def is_err(self) -> bool:
        """Return True if this Result is Err (failure)."""
        return not self._is_ok

    def __repr__(self) -> str:
        if self._is_ok:
            return f"Ok({self._value!r})"
        return f"Err({self._error!r})"

    @property
    def value(self) -> T:
        """Return the Ok value.

        Raises:
            ValueError: If this Result is Err.
        """
        if not self._is_ok:
            msg = "Cannot access value on Err result"
            raise ValueError(msg)
        return cast(T, self._value)

    @property
    def error(self) -> E:
        """Return the Err value.

        Raises:
            ValueError: If this Result is Ok.
        """
        if self._is_ok:
            msg = "Cannot access error on Ok result"
            raise ValueError(msg)
        return cast(E, self._error)

    def unwrap(self) -> T:
        """Return the Ok value or raise ValueError carrying the error text."""
        if self._is_ok:
            return cast(T, self._value)
        raise ValueError(str(self._error))

    def unwrap_or(self, default: T) -> T:
        """Return the Ok value, or ``default`` if this Result is Err."""
        if self._is_ok:
            return cast(T, self._value)
        return default

    def and_then[U](self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain a Result-producing operation.

        If this Result is Ok, ``fn`` is called with the value and its Result
        is returned. If this Result is Err, ``fn`` is never called and the
        error is passed through.

        Args:
            fn: Function that takes the Ok value and returns a new Result.

        Returns:
            The result of fn if Ok, or the original Err.
        """
        if self._is_ok:
            return fn(cast(T, self._value))
        return Result.err(cast(E, self._error))
