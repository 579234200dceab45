"""
Accidental primitive - bounded alterations of a step.

An accidental raises or lowers a step by up to two semitones. The bound is
what makes the rest of the arithmetic fallible: triple sharps and flats are
never written, so anything that would need one has no spelling.
"""

from __future__ import annotations

from enum import IntEnum

from tonality.constants import ALTERATION_MAX, ALTERATION_MIN

# Display mappings (module level to avoid IntEnum member issues)
_DESCRIPTIONS: dict[int, str] = {
    -2: "double flat",
    -1: "flat",
    0: "natural",
    1: "sharp",
    2: "double sharp",
}
_SYMBOLS: dict[int, str] = {
    -2: "♭♭",
    -1: "♭",
    0: "♮",
    1: "♯",
    2: "♯♯",
}
_ASCII_SYMBOLS: dict[int, str] = {
    -2: "bb",
    -1: "b",
    0: "",
    1: "#",
    2: "##",
}


class Accidental(IntEnum):
    """
    Alteration in semitones, double flat (-2) through double sharp (+2).

    Values outside this range are not accidentals; the fallible
    constructors return None for them instead of clamping.
    """

    DBL_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DBL_SHARP = 2

    @classmethod
    def from_semitones(cls, semitones: int) -> Accidental | None:
        """Build an accidental from a semitone offset, or None if |semitones| > 2."""
        if not ALTERATION_MIN <= semitones <= ALTERATION_MAX:
            return None
        return cls(semitones)

    def shift(self, delta: int) -> Accidental | None:
        """Raise (or lower, if negative) by delta semitones, or None when out of range."""
        return Accidental.from_semitones(self.value + delta)

    @property
    def description(self) -> str:
        """Spoken name, e.g. 'double flat'."""
        return _DESCRIPTIONS[self.value]

    @property
    def symbol(self) -> str:
        """Notation symbol. Natural is shown as ♮."""
        return _SYMBOLS[self.value]

    @property
    def ascii_symbol(self) -> str:
        """ASCII spelling suffix, empty for natural."""
        return _ASCII_SYMBOLS[self.value]

    def __str__(self) -> str:
        return self.description

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


# An alteration is an accidental viewed as a bounded semitone offset.
Alteration = Accidental
