"""The StyleSource capability.

Colors, attributes and styles can all start a modifier chain:

    Color.RED.bold().paint("alert")
    Attr.UNDERLINE.fg(Color.BLUE).paint("link")
    Style().bg(Color.BLACK).with_(render_table)

Each implementor only provides ``to_style()``. The modifiers defined here
convert ``self`` to a Style and override exactly one field, returning a new
Style; nothing is ever mutated in place, so a chain can be stored and reused
as a building block.
"""

from __future__ import annotations

from collections.abc import Callable
import contextlib
from typing import TYPE_CHECKING, Any

from term_painter.style.flags import AttributeFlag, TextAttribute

if TYPE_CHECKING:
    from term_painter.style.color import Color
    from term_painter.style.painted import Painted
    from term_painter.style.style import Style
    from term_painter.terminal.context import PaintContext


class StyleSource:
    """Mixin for everything that can be turned into a Style."""

    __slots__ = ()

    def to_style(self) -> Style:
        """Return the canonical Style this value stands for.

        Implementors must override this. (Not an ``abc.abstractmethod``:
        ABCMeta does not combine with the Enum metaclass of ``Attr``.)
        """
        raise NotImplementedError

    def _with_flag(self, attribute: TextAttribute, flag: AttributeFlag) -> Style:
        return self.to_style().with_flag(attribute, flag)

    def fg(self, color: Color) -> Style:
        """Set the foreground (text) color."""
        return self.to_style().with_colors(foreground=color)

    def bg(self, color: Color) -> Style:
        """Set the background color."""
        return self.to_style().with_colors(background=color)

    def bold(self) -> Style:
        """Make the text bold."""
        return self._with_flag(TextAttribute.BOLD, AttributeFlag.ON)

    def dim(self) -> Style:
        """Dim the text."""
        return self._with_flag(TextAttribute.DIM, AttributeFlag.ON)

    def underline(self) -> Style:
        """Underline the text."""
        return self._with_flag(TextAttribute.UNDERLINE, AttributeFlag.ON)

    def not_underline(self) -> Style:
        """Explicitly switch underlining off, even inside an underlined scope."""
        return self._with_flag(TextAttribute.UNDERLINE, AttributeFlag.OFF)

    def blink(self) -> Style:
        """Make the text blink."""
        return self._with_flag(TextAttribute.BLINK, AttributeFlag.ON)

    def reverse(self) -> Style:
        """Swap foreground and background colors."""
        return self._with_flag(TextAttribute.REVERSE, AttributeFlag.ON)

    def secure(self) -> Style:
        """Secure (concealed) mode."""
        return self._with_flag(TextAttribute.SECURE, AttributeFlag.ON)

    def paint[T](self, obj: T) -> Painted[T]:
        """Wrap ``obj`` together with this style.

        The returned Painted writes ``obj`` with the style applied and resets
        the terminal afterwards. Its ``str()``/``format()`` text is the plain
        text of ``obj``.
        """
        from term_painter.style.painted import Painted

        return Painted(self.to_style(), obj)

    def scope(self, context: PaintContext | None = None) -> contextlib.AbstractContextManager[Style]:
        """Apply this style for the duration of a ``with`` block.

        Example:
            with Color.RED.scope():
                print("red")
                with Attr.BOLD.scope():
                    print("red and bold")
                print("red again")

        Args:
            context: Terminal context to use. Defaults to the context of the
                current thread.
        """
        from term_painter.terminal.scope import styled_scope

        return styled_scope(self.to_style(), context)

    def with_[R](self, fn: Callable[..., R], *args: Any, **kwargs: Any) -> R:
        """Call ``fn(*args, **kwargs)`` with this style applied, then restore.

        Everything printed inside ``fn`` uses the style. Nested calls layer on
        top of the enclosing style; when ``fn`` returns or raises, the style
        that was active before is restored.

        Returns:
            Whatever ``fn`` returns.
        """
        with self.scope():
            return fn(*args, **kwargs)
