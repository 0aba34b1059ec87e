"""Unit tests for term_painter.style.color module."""

import pytest

from term_painter.style import Attr, Color, Style


class TestColorConstants:
    """Test the named colors and the NOT_SET sentinel."""

    def test_named_palette_order(self) -> None:
        named = Color.named()

        assert len(named) == 16
        assert [color.term_constant() for color in named] == list(range(16))
        assert named[1] == Color.RED
        assert named[9] == Color.BRIGHT_RED

    def test_not_set_has_no_constant(self) -> None:
        assert Color.NOT_SET.term_constant() is None
        assert not Color.NOT_SET.is_set
        assert Color.BLACK.is_set

    def test_custom_passes_index_through(self) -> None:
        assert Color.custom(208).term_constant() == 208
        assert Color.custom(3) != Color.YELLOW

    def test_custom_is_not_range_checked(self) -> None:
        assert Color.custom(1000).term_constant() == 1000

    def test_repr(self) -> None:
        assert repr(Color.BRIGHT_CYAN) == "Color.BRIGHT_CYAN"
        assert repr(Color.NOT_SET) == "Color.NOT_SET"
        assert repr(Color.custom(42)) == "Color.custom(42)"


class TestColorFromName:
    """Test resolving colors from text."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("red", Color.RED),
            ("Bright-Blue", Color.BRIGHT_BLUE),
            ("bright white", Color.BRIGHT_WHITE),
            ("none", Color.NOT_SET),
            ("", Color.NOT_SET),
            ("208", Color.custom(208)),
        ],
    )
    def test_from_name(self, text: str, expected: Color) -> None:
        assert Color.from_name(text) == expected

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown color"):
            Color.from_name("chartreuse")


class TestColorAsStyleSource:
    """A color starts a chain with itself as foreground."""

    def test_to_style_sets_foreground(self) -> None:
        assert Color.RED.to_style() == Style(foreground=Color.RED)
        assert Color.RED.to_style() == Attr.PLAIN.fg(Color.RED)

    def test_not_set_to_style_is_default(self) -> None:
        assert Color.NOT_SET.to_style() == Style()

    def test_modifier_chain(self) -> None:
        style = Color.RED.bg(Color.GREEN).bold()

        assert style.foreground == Color.RED
        assert style.background == Color.GREEN
        assert style == Attr.BOLD.fg(Color.RED).bg(Color.GREEN)

    def test_colors_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Color.RED.index = 2  # type: ignore[misc]
