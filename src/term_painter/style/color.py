"""Terminal colors.

A closed set of named colors plus ``Color.custom(n)`` for any palette index.
``Color.NOT_SET`` is the sentinel meaning "leave this channel alone": it
never resets a color to the terminal default and never overrides another
color when styles are merged.

The driver constant of a named color is its position in the 16-color ANSI
palette (black=0 ... white=7, bright black=8 ... bright white=15). A custom
color passes its index through unchanged; whether the terminal accepts it is
the driver's business.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from term_painter.style.source import StyleSource

if TYPE_CHECKING:
    from term_painter.style.style import Style

_NAMED_INDICES: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}

_CUSTOM = "custom"
_NOT_SET = "not_set"


@dataclass(frozen=True, slots=True)
class Color(StyleSource):
    """A foreground or background color.

    Use the class constants (``Color.RED``, ``Color.BRIGHT_BLUE``, ...) or
    ``Color.custom(n)``. As a chain start, a color sets the foreground:
    ``Color.RED.to_style() == Attr.PLAIN.fg(Color.RED)``.

    Attributes:
        name: Lower-case color name, "not_set" or "custom".
        index: Driver palette index, or None for the sentinel.
    """

    name: str
    index: int | None = None

    NOT_SET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    BRIGHT_BLACK: ClassVar[Color]
    BRIGHT_RED: ClassVar[Color]
    BRIGHT_GREEN: ClassVar[Color]
    BRIGHT_YELLOW: ClassVar[Color]
    BRIGHT_BLUE: ClassVar[Color]
    BRIGHT_MAGENTA: ClassVar[Color]
    BRIGHT_CYAN: ClassVar[Color]
    BRIGHT_WHITE: ClassVar[Color]

    @classmethod
    def custom(cls, index: int) -> Color:
        """Return a color for an arbitrary palette index.

        No range check happens here; an index the terminal cannot show is
        reported by the driver when the color is applied.
        """
        return cls(_CUSTOM, index)

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Resolve a color from configuration or command-line text.

        Accepts named colors in any case with ``-``, ``_`` or spaces
        (``"Bright-Blue"``), ``"not_set"``/``"none"``, and decimal palette
        indices (``"208"``).

        Raises:
            ValueError: If the text names no color.
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        if key in (_NOT_SET, "notset", "none", "normal", ""):
            return cls.NOT_SET
        if key in _NAMED_INDICES:
            return cls(key, _NAMED_INDICES[key])
        if key.isdigit():
            return cls.custom(int(key))
        msg = f"Unknown color: {name!r}"
        raise ValueError(msg)

    @classmethod
    def named(cls) -> tuple[Color, ...]:
        """Return the 16 named colors in palette order."""
        return tuple(cls(name, index) for name, index in _NAMED_INDICES.items())

    @property
    def is_set(self) -> bool:
        return self.index is not None

    def term_constant(self) -> int | None:
        """Return the driver palette index, or None for ``NOT_SET``."""
        return self.index

    def to_style(self) -> Style:
        """Return a default Style with this color as foreground."""
        from term_painter.style.style import Style

        return Style(foreground=self)

    def __repr__(self) -> str:
        if self.name == _CUSTOM:
            return f"Color.custom({self.index})"
        return f"Color.{self.name.upper()}"


Color.NOT_SET = Color(_NOT_SET)
for _name, _index in _NAMED_INDICES.items():
    setattr(Color, _name.upper(), Color(_name, _index))
del _name, _index
