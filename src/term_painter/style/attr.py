"""Attribute chain starts.

``Attr.PLAIN`` is the neutral starting point (a default Style); the other
members start a chain with one attribute switched on:

    Attr.BOLD.fg(Color.RED).paint("Red and bold")
"""

from __future__ import annotations

from enum import Enum

from term_painter.style.flags import AttributeFlag, TextAttribute
from term_painter.style.source import StyleSource
from term_painter.style.style import Style


class Attr(StyleSource, Enum):
    """Text attributes usable as the start of a modifier chain."""

    PLAIN = None
    BOLD = TextAttribute.BOLD
    DIM = TextAttribute.DIM
    UNDERLINE = TextAttribute.UNDERLINE
    BLINK = TextAttribute.BLINK
    REVERSE = TextAttribute.REVERSE
    SECURE = TextAttribute.SECURE

    def to_style(self) -> Style:
        """Return a default Style with this attribute switched on."""
        if self.value is None:
            return Style()
        return Style().with_flag(self.value, AttributeFlag.ON)
