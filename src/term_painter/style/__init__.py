"""Style composition: colors, attributes, styles and painted values."""

from term_painter.style.attr import Attr
from term_painter.style.color import Color
from term_painter.style.flags import AttributeFlag, AttributeSet, TextAttribute
from term_painter.style.painted import Painted, echo
from term_painter.style.source import StyleSource
from term_painter.style.style import Style

__all__ = [
    # Chain starts
    "Attr",
    "Color",
    "Style",
    "StyleSource",
    # Attribute flags
    "AttributeFlag",
    "AttributeSet",
    "TextAttribute",
    # Output
    "Painted",
    "echo",
]
