"""The Style value and its terminal operations.

A Style is a foreground color, a background color and six tri-state text
attributes. It is built from chain starts and modifiers, merged with ``&``
when scopes nest, and applied to a terminal driver.

Merging (``outer & inner``) lets ``inner`` override ``outer`` wherever
``inner`` has an opinion: a color other than ``Color.NOT_SET`` or an
attribute that is not UNSET. Explicit OFF therefore wins over an enclosing
ON, while UNSET never changes anything.

Applying a style only ever adds state to the terminal. The terminal state
cannot be read back, so "reverting" means resetting everything and applying
the style that should be active again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from functools import partial
from typing import TYPE_CHECKING

from term_painter.core.errors import TerminalError
from term_painter.core.types import Result
from term_painter.style.color import Color
from term_painter.style.flags import AttributeFlag, AttributeSet, TextAttribute
from term_painter.style.source import StyleSource

if TYPE_CHECKING:
    from term_painter.terminal.driver import TerminalDriver

type DriverCall = Callable[[], Result[None, TerminalError]]


@dataclass(frozen=True, slots=True)
class Style(StyleSource):
    """All properties of a style.

    ``Style()`` changes nothing when applied. Styles compare equal only if
    every field matches, including the difference between an UNSET and an
    explicitly OFF attribute.

    Attributes:
        foreground: Text color, ``Color.NOT_SET`` to leave it unchanged.
        background: Background color, ``Color.NOT_SET`` to leave it unchanged.
        attributes: The packed tri-state text attributes.
    """

    foreground: Color = Color.NOT_SET
    background: Color = Color.NOT_SET
    attributes: AttributeSet = field(default_factory=AttributeSet)

    def to_style(self) -> Style:
        return self

    def get(self, attribute: TextAttribute) -> AttributeFlag:
        """Return the state of one text attribute."""
        return self.attributes.get(attribute)

    def with_flag(self, attribute: TextAttribute, flag: AttributeFlag) -> Style:
        """Return a copy with ``attribute`` set to ``flag``.

        Unlike the fluent modifiers this accepts every state, including
        ``AttributeFlag.UNSET``.
        """
        return replace(self, attributes=self.attributes.set(attribute, flag))

    def with_colors(
        self,
        *,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> Style:
        """Return a copy with the given color channels replaced.

        ``None`` leaves a channel as it is; pass ``Color.NOT_SET`` to clear it.
        """
        return replace(
            self,
            foreground=self.foreground if foreground is None else foreground,
            background=self.background if background is None else background,
        )

    def and_(self, other: StyleSource) -> Style:
        """Return ``self`` overridden by every explicit setting of ``other``.

        Colors: ``other``'s color wins unless it is ``Color.NOT_SET``.
        Attributes: ``other``'s flag wins unless it is UNSET.
        """
        o = other.to_style()
        return Style(
            foreground=self.foreground if o.foreground == Color.NOT_SET else o.foreground,
            background=self.background if o.background == Color.NOT_SET else o.background,
            attributes=self.attributes.overlay(o.attributes),
        )

    def __and__(self, other: StyleSource) -> Style:
        return self.and_(other)

    def _driver_calls(self, terminal: TerminalDriver) -> Iterator[DriverCall]:
        if (fg := self.foreground.term_constant()) is not None:
            yield partial(terminal.fg, fg)
        if (bg := self.background.term_constant()) is not None:
            yield partial(terminal.bg, bg)

        for attribute, flag in self.attributes.items():
            if flag is AttributeFlag.ON:
                yield partial(terminal.attr, attribute, True)
            elif flag is AttributeFlag.OFF and attribute.switchable:
                yield partial(terminal.attr, attribute, False)

    def apply(self, terminal: TerminalDriver | None) -> Result[None, TerminalError]:
        """Issue the driver calls for every explicit setting of this style.

        Colors are set whenever they are not ``NOT_SET``. Attributes are
        switched on when ON; OFF is only sent for attributes the driver can
        switch off individually (underline). The first failing call stops
        the remaining ones; calls already made are not undone.

        Args:
            terminal: The driver to talk to, or None if no terminal could be
                acquired (which is reported as a failure).

        Returns:
            Ok(None), or the error of the first failing call.
        """
        if terminal is None:
            return Result.err(TerminalError("No terminal available", operation="open"))

        for call in self._driver_calls(terminal):
            result = call()
            if result.is_err:
                return result
        return Result.ok(None)

    def revert_to(self, terminal: TerminalDriver | None) -> Result[None, TerminalError]:
        """Reset the whole terminal, then apply this style.

        Returns:
            Ok(None), or the error of the reset or of the first failing
            apply call.
        """
        if terminal is None:
            return Result.err(TerminalError("No terminal available", operation="open"))
        return terminal.reset().and_then(lambda _: self.apply(terminal))

    def __repr__(self) -> str:
        parts = []
        if self.foreground.is_set:
            parts.append(f"foreground={self.foreground!r}")
        if self.background.is_set:
            parts.append(f"background={self.background!r}")
        parts.extend(
            f"{attribute.name.lower()}={flag.name}"
            for attribute, flag in self.attributes.items()
            if flag is not AttributeFlag.UNSET
        )
        return f"Style({', '.join(parts)})"
