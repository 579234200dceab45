"""
Interval primitive - spelled intervals on the line of fifths.

An Interval relates two tonal pitch classes. Like a Tpc it is a single
coordinate on the line of fifths: the unison is 0, a perfect fifth +1, a
major second +2, and so on. Stacking intervals is integer addition plus one
bounds check; inverting is negation.

Intervals are octave-independent (a descending major third and an ascending
minor sixth reach the same Tpc) and are ordered by their position on the
line of fifths, not by size: P5 < A4.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from tonality.constants import (
    DELTA_ENHARMONIC,
    DELTA_SEMITONE,
    INTERVAL_MAX,
    INTERVAL_MIN,
    NUM_STEPS,
    ErrorMessages,
)

if TYPE_CHECKING:
    from .tpc import Tpc


class IntervalQuality(str, Enum):
    """Interval qualities, from narrowest to widest."""

    DIMINISHED = "diminished"
    MINOR = "minor"
    PERFECT = "perfect"
    MAJOR = "major"
    AUGMENTED = "augmented"


# Line-of-fifths offset of the perfect or major interval of each size
# (size 1 = unison ... size 7 = seventh)
_BASE_FIFTHS: dict[int, int] = {1: 0, 2: 2, 3: 4, 4: -1, 5: 1, 6: 3, 7: 5}
_PERFECT_SIZES = frozenset({1, 4, 5})

# Quality -> number of chromatic semitones away from the base interval
_PERFECT_SHIFTS: dict[IntervalQuality, int] = {
    IntervalQuality.DIMINISHED: -1,
    IntervalQuality.PERFECT: 0,
    IntervalQuality.AUGMENTED: 1,
}
_IMPERFECT_SHIFTS: dict[IntervalQuality, int] = {
    IntervalQuality.DIMINISHED: -2,
    IntervalQuality.MINOR: -1,
    IntervalQuality.MAJOR: 0,
    IntervalQuality.AUGMENTED: 1,
}

_SIZE_NAMES: dict[int, str] = {
    1: "Unison",
    2: "2nd",
    3: "3rd",
    4: "4th",
    5: "5th",
    6: "6th",
    7: "7th",
}
_QUALITY_ABBREVIATIONS: dict[IntervalQuality, str] = {
    IntervalQuality.DIMINISHED: "d",
    IntervalQuality.MINOR: "m",
    IntervalQuality.PERFECT: "P",
    IntervalQuality.MAJOR: "M",
    IntervalQuality.AUGMENTED: "A",
}


@total_ordering
class Interval:
    """
    A spelled interval between tonal pitch classes.

    Stored as an offset on the line of fifths, from -12 (diminished second)
    to +12 (augmented seventh). Immutable and hashable.
    """

    __slots__ = ("_fifths",)
    _fifths: int

    # Named intervals (class constants), in line-of-fifths order
    DIMINISHED_SECOND: ClassVar[Interval]
    DIMINISHED_SIXTH: ClassVar[Interval]
    DIMINISHED_THIRD: ClassVar[Interval]
    DIMINISHED_SEVENTH: ClassVar[Interval]
    DIMINISHED_FOURTH: ClassVar[Interval]
    DIMINISHED_UNISON: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    UNISON: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    AUGMENTED_UNISON: ClassVar[Interval]
    AUGMENTED_FIFTH: ClassVar[Interval]
    AUGMENTED_SECOND: ClassVar[Interval]
    AUGMENTED_SIXTH: ClassVar[Interval]
    AUGMENTED_THIRD: ClassVar[Interval]
    AUGMENTED_SEVENTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]

    # Extremes of the supported window
    MIN: ClassVar[Interval]
    MAX: ClassVar[Interval]

    # Short aliases
    d2: ClassVar[Interval]
    d6: ClassVar[Interval]
    d3: ClassVar[Interval]
    d7: ClassVar[Interval]
    d4: ClassVar[Interval]
    d1: ClassVar[Interval]
    d5: ClassVar[Interval]
    m2: ClassVar[Interval]
    m6: ClassVar[Interval]
    m3: ClassVar[Interval]
    m7: ClassVar[Interval]
    P4: ClassVar[Interval]
    P1: ClassVar[Interval]
    P5: ClassVar[Interval]
    M2: ClassVar[Interval]
    M6: ClassVar[Interval]
    M3: ClassVar[Interval]
    M7: ClassVar[Interval]
    A4: ClassVar[Interval]
    A1: ClassVar[Interval]
    A5: ClassVar[Interval]
    A2: ClassVar[Interval]
    A6: ClassVar[Interval]
    A3: ClassVar[Interval]
    A7: ClassVar[Interval]

    def __init__(self, fifths: int) -> None:
        """
        Create an interval from its line-of-fifths offset.

        Raises ValueError outside -12..12; use from_fifths() for a fallible lookup.
        """
        if not INTERVAL_MIN <= fifths <= INTERVAL_MAX:
            raise ValueError(
                ErrorMessages.INVALID_INTERVAL.format(
                    low=INTERVAL_MIN, high=INTERVAL_MAX, fifths=fifths
                )
            )
        object.__setattr__(self, "_fifths", fifths)

    @classmethod
    def from_fifths(cls, fifths: int) -> Interval | None:
        """Look up an interval by line-of-fifths offset, or None if doubly altered."""
        if not INTERVAL_MIN <= fifths <= INTERVAL_MAX:
            return None
        return cls(fifths)

    @classmethod
    def from_size_and_quality(cls, size: int, quality: IntervalQuality) -> Interval | None:
        """
        Build an interval from its diatonic size and quality.

        Args:
            size: 1 = unison, 2 = second ... 7 = seventh; compound sizes
                reduce to their simple form (9 -> 2, 8 -> 1)
            quality: Must suit the size - perfect for 1/4/5, major/minor otherwise

        Returns:
            The interval, or None for an invalid size/quality pair
        """
        if size < 1:
            return None
        simple = (size - 1) % NUM_STEPS + 1
        shifts = _PERFECT_SHIFTS if simple in _PERFECT_SIZES else _IMPERFECT_SHIFTS
        if quality not in shifts:
            return None
        return cls.from_fifths(_BASE_FIFTHS[simple] + DELTA_SEMITONE * shifts[quality])

    @classmethod
    def between(cls, lower: Tpc, upper: Tpc) -> Interval | None:
        """
        The interval from one tonal pitch class up to another.

        Returns None when the spellings are more than augmented/diminished apart
        (e.g. Cbb up to C##).
        """
        return cls.from_fifths(upper.fifths - lower.fifths)

    @property
    def fifths(self) -> int:
        """Offset on the line of fifths."""
        return self._fifths

    @property
    def size(self) -> int:
        """Diatonic size, 1 (unison) through 7 (seventh)."""
        return self._fifths * 4 % NUM_STEPS + 1

    @property
    def quality(self) -> IntervalQuality:
        """The interval's quality."""
        shift = (self._fifths + 1) // DELTA_SEMITONE
        shifts = _PERFECT_SHIFTS if self.size in _PERFECT_SIZES else _IMPERFECT_SHIFTS
        for quality, quality_shift in shifts.items():
            if quality_shift == shift:
                return quality
        raise AssertionError(f"No quality for offset {self._fifths}")

    @property
    def semitones(self) -> int:
        """Width in semitones within an octave (0-11)."""
        return self._fifths * 7 % 12

    @property
    def short_name(self) -> str:
        """Abbreviated name, e.g. 'M3', 'd5', 'A1'."""
        return f"{_QUALITY_ABBREVIATIONS[self.quality]}{self.size}"

    def enharmonic(self, other: Interval) -> bool:
        """
        Whether two intervals span the same number of semitones.

        A4 and d5 are enharmonic; P1 and A1 are not.
        """
        return (self._fifths - other._fifths) % DELTA_ENHARMONIC == 0

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 -> m6
        P5 -> P4
        """
        return -self

    def __add__(self, other: Interval) -> Interval | None:
        """Stack two intervals, or None if the result is doubly altered."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_fifths(self._fifths + other._fifths)

    def __sub__(self, other: Interval) -> Interval | None:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_fifths(self._fifths - other._fifths)

    def __neg__(self) -> Interval:
        """Inversion; the window is symmetric so this always succeeds."""
        return Interval(-self._fifths)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._fifths == other._fifths)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._fifths < other._fifths)

    def __hash__(self) -> int:
        return hash(self._fifths)

    def __repr__(self) -> str:
        return f"Interval.{_NAMES[self._fifths]}"

    def __str__(self) -> str:
        """Human-readable interval name, e.g. 'Major 3rd'."""
        return f"{self.quality.value.capitalize()} {_SIZE_NAMES[self.size]}"


# Constant name of every offset, for repr
_NAMES: dict[int, str] = {
    -12: "DIMINISHED_SECOND",
    -11: "DIMINISHED_SIXTH",
    -10: "DIMINISHED_THIRD",
    -9: "DIMINISHED_SEVENTH",
    -8: "DIMINISHED_FOURTH",
    -7: "DIMINISHED_UNISON",
    -6: "DIMINISHED_FIFTH",
    -5: "MINOR_SECOND",
    -4: "MINOR_SIXTH",
    -3: "MINOR_THIRD",
    -2: "MINOR_SEVENTH",
    -1: "PERFECT_FOURTH",
    0: "UNISON",
    1: "PERFECT_FIFTH",
    2: "MAJOR_SECOND",
    3: "MAJOR_SIXTH",
    4: "MAJOR_THIRD",
    5: "MAJOR_SEVENTH",
    6: "AUGMENTED_FOURTH",
    7: "AUGMENTED_UNISON",
    8: "AUGMENTED_FIFTH",
    9: "AUGMENTED_SECOND",
    10: "AUGMENTED_SIXTH",
    11: "AUGMENTED_THIRD",
    12: "AUGMENTED_SEVENTH",
}

# Initialize class constants after class is defined
Interval.DIMINISHED_SECOND = Interval(-12)
Interval.DIMINISHED_SIXTH = Interval(-11)
Interval.DIMINISHED_THIRD = Interval(-10)
Interval.DIMINISHED_SEVENTH = Interval(-9)
Interval.DIMINISHED_FOURTH = Interval(-8)
Interval.DIMINISHED_UNISON = Interval(-7)
Interval.DIMINISHED_FIFTH = Interval(-6)
Interval.MINOR_SECOND = Interval(-5)
Interval.MINOR_SIXTH = Interval(-4)
Interval.MINOR_THIRD = Interval(-3)
Interval.MINOR_SEVENTH = Interval(-2)
Interval.PERFECT_FOURTH = Interval(-1)
Interval.UNISON = Interval(0)
Interval.PERFECT_FIFTH = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MAJOR_SIXTH = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.MAJOR_SEVENTH = Interval(5)
Interval.AUGMENTED_FOURTH = Interval(6)
Interval.AUGMENTED_UNISON = Interval(7)
Interval.AUGMENTED_FIFTH = Interval(8)
Interval.AUGMENTED_SECOND = Interval(9)
Interval.AUGMENTED_SIXTH = Interval(10)
Interval.AUGMENTED_THIRD = Interval(11)
Interval.AUGMENTED_SEVENTH = Interval(12)
Interval.TRITONE = Interval.AUGMENTED_FOURTH

Interval.MIN = Interval.DIMINISHED_SECOND
Interval.MAX = Interval.AUGMENTED_SEVENTH

# Short aliases
Interval.d2 = Interval.DIMINISHED_SECOND
Interval.d6 = Interval.DIMINISHED_SIXTH
Interval.d3 = Interval.DIMINISHED_THIRD
Interval.d7 = Interval.DIMINISHED_SEVENTH
Interval.d4 = Interval.DIMINISHED_FOURTH
Interval.d1 = Interval.DIMINISHED_UNISON
Interval.d5 = Interval.DIMINISHED_FIFTH
Interval.m2 = Interval.MINOR_SECOND
Interval.m6 = Interval.MINOR_SIXTH
Interval.m3 = Interval.MINOR_THIRD
Interval.m7 = Interval.MINOR_SEVENTH
Interval.P4 = Interval.PERFECT_FOURTH
Interval.P1 = Interval.UNISON
Interval.P5 = Interval.PERFECT_FIFTH
Interval.M2 = Interval.MAJOR_SECOND
Interval.M6 = Interval.MAJOR_SIXTH
Interval.M3 = Interval.MAJOR_THIRD
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.A4 = Interval.AUGMENTED_FOURTH
Interval.A1 = Interval.AUGMENTED_UNISON
Interval.A5 = Interval.AUGMENTED_FIFTH
Interval.A2 = Interval.AUGMENTED_SECOND
Interval.A6 = Interval.AUGMENTED_SIXTH
Interval.A3 = Interval.AUGMENTED_THIRD
Interval.A7 = Interval.AUGMENTED_SEVENTH
