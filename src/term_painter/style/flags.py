"""Tri-state text attributes packed two bits apiece.

Each attribute of a style is one of three states: unset (no opinion),
explicitly off, or explicitly on. The state is stored in a 2-bit slot:

    00 => UNSET, 10 => OFF, 11 => ON

The high bit of a slot is the "set" bit and the low bit carries the value.
The remaining pattern (01) has no meaning of its own and reads as UNSET, so
every integer is a valid AttributeSet and zero means "everything unset".

Slots are laid out in declaration order of TextAttribute with bold in the
most significant pair and secure in the least significant one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum


class AttributeFlag(IntEnum):
    """State of a single text attribute."""

    UNSET = 0b00
    OFF = 0b10
    ON = 0b11

    @classmethod
    def from_bits(cls, bits: int) -> AttributeFlag:
        """Decode a 2-bit slot. The stray pattern 0b01 decodes as UNSET."""
        if bits & 0b10:
            return cls.ON if bits & 0b01 else cls.OFF
        return cls.UNSET

    @classmethod
    def from_bool(cls, value: bool | None) -> AttributeFlag:
        """Convert the optional-boolean view (None/False/True) to a flag."""
        if value is None:
            return cls.UNSET
        return cls.ON if value else cls.OFF

    def to_bool(self) -> bool | None:
        """Return None for UNSET, otherwise whether the attribute is on."""
        if self is AttributeFlag.UNSET:
            return None
        return self is AttributeFlag.ON


class TextAttribute(IntEnum):
    """The six attributes a style can carry; the value is the slot index."""

    BOLD = 5
    DIM = 4
    UNDERLINE = 3
    BLINK = 2
    REVERSE = 1
    SECURE = 0

    @property
    def shift(self) -> int:
        return self.value * 2

    @property
    def switchable(self) -> bool:
        """Whether the driver can turn this attribute off on its own.

        Only underline has an explicit "off" call; every other attribute can
        only be cleared by a full terminal reset.
        """
        return self is TextAttribute.UNDERLINE


# Set bits sit in the high half of every slot, value bits in the low half.
_SET_MASK = 0b101010101010
_VALUE_MASK = 0b010101010101
_ALL_MASK = _SET_MASK | _VALUE_MASK


@dataclass(frozen=True, slots=True)
class AttributeSet:
    """Six packed tri-state attribute flags.

    Immutable: ``set`` returns a new AttributeSet. Equality is structural,
    so an explicit OFF never compares equal to UNSET.

    Attributes:
        bits: The packed 12-bit representation.
    """

    bits: int = 0

    def __post_init__(self) -> None:
        if self.bits & ~_ALL_MASK:
            msg = f"AttributeSet bits out of range: {self.bits:#x}"
            raise ValueError(msg)

    def get(self, attribute: TextAttribute) -> AttributeFlag:
        """Return the state of ``attribute``."""
        return AttributeFlag.from_bits((self.bits >> attribute.shift) & 0b11)

    def set(self, attribute: TextAttribute, flag: AttributeFlag) -> AttributeSet:
        """Return a copy with ``attribute`` replaced by ``flag``.

        The slot is cleared first, so any previous state (including the
        stray 0b01 pattern) is overwritten unconditionally.
        """
        cleared = self.bits & ~(0b11 << attribute.shift)
        return AttributeSet(cleared | (int(flag) << attribute.shift))

    def overlay(self, other: AttributeSet) -> AttributeSet:
        """Merge ``other`` on top of ``self``.

        For every attribute, an UNSET slot in ``other`` keeps the state of
        ``self``; any other state in ``other`` (OFF or ON) replaces it.
        Equivalent to calling ``set`` per attribute, done on all six slots
        at once: the set bits are OR-ed and each value bit comes from
        ``other`` where its set bit is on, else from ``self``.
        """
        x, y = self.bits, other.bits
        y_set = y >> 1
        set_bits = (x | y) & _SET_MASK
        value_bits = ((y_set & y) | (~y_set & x)) & _VALUE_MASK
        return AttributeSet(set_bits | value_bits)

    def items(self) -> Iterator[tuple[TextAttribute, AttributeFlag]]:
        """Yield ``(attribute, flag)`` for all six attributes in slot order."""
        for attribute in TextAttribute:
            yield attribute, self.get(attribute)

    def __repr__(self) -> str:
        explicit = ", ".join(
            f"{attribute.name.lower()}={flag.name}"
            for attribute, flag in self.items()
            if flag is not AttributeFlag.UNSET
        )
        return f"AttributeSet({explicit})"
