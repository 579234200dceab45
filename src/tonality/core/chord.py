"""
Chord primitives - ChordQuality, Chord, RomanNumeral.

Chords are stacks of spelled intervals over a root. Spelling a chord is
transposing the root by each interval in turn; tones with no valid spelling
(a major third above B##, say) are dropped rather than failing the chord.
Roman numerals are key-independent chord references.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from tonality.constants import NUM_STEPS, ErrorMessages

from .interval import Interval
from .key import Key
from .scale import ScaleDegree
from .tpc import Tpc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    Intervals are measured from the root, not stacked, and kept in chord
    order: a dominant seventh is P1 M3 P5 m7.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""
    suffix: str = ""  # Chord symbol suffix: "m", "dim", "maj7", ...

    # Common chord qualities (defined after class)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    DIMINISHED_7: ClassVar[ChordQuality]
    HALF_DIMINISHED_7: ClassVar[ChordQuality]
    SUS2: ClassVar[ChordQuality]
    SUS4: ClassVar[ChordQuality]

    @classmethod
    def from_intervals(cls, intervals: tuple[Interval, ...]) -> ChordQuality | None:
        """Look up the named quality with exactly these intervals, if any."""
        for quality in _NAMED_QUALITIES:
            if quality.intervals == intervals:
                return quality
        return None

    def get_tpcs(self, root: Tpc) -> list[Tpc]:
        """
        Spell the chord tones over a root.

        Args:
            root: The root tonal pitch class

        Returns:
            The tones in interval order, leaving out any that would need a
            triple sharp or triple flat
        """
        tpcs = []
        for interval in self.intervals:
            tpc = root + interval
            if tpc is None:
                logger.debug("No spelling for %s above %s", interval, root)
                continue
            tpcs.append(tpc)
        return tpcs

    def missing_intervals(self, root: Tpc) -> list[Interval]:
        """The intervals of this quality that cannot be spelled over a root."""
        return [interval for interval in self.intervals if root + interval is None]

    def _interval_of_size(self, size: int) -> Interval | None:
        for interval in self.intervals:
            if interval.size == size and interval != Interval.UNISON:
                return interval
        return None

    @property
    def root(self) -> Interval:
        """The root interval (always unison)."""
        return Interval.UNISON

    @property
    def third(self) -> Interval | None:
        """The third of the chord (if present)."""
        return self._interval_of_size(3)

    @property
    def fifth(self) -> Interval | None:
        """The fifth of the chord (if present)."""
        return self._interval_of_size(5)

    @property
    def seventh(self) -> Interval | None:
        """The seventh of the chord (if present)."""
        return self._interval_of_size(7)

    def __str__(self) -> str:
        return self.name or f"ChordQuality({', '.join(i.short_name for i in self.intervals)})"

    def __repr__(self) -> str:
        if self.name:
            return f"ChordQuality.{self.name.upper().replace(' ', '_').replace('-', '_')}"
        return f"ChordQuality({self.intervals!r})"


# Define chord qualities
_P1 = Interval.UNISON

ChordQuality.MAJOR = ChordQuality((_P1, Interval.M3, Interval.P5), "major", "")
ChordQuality.MINOR = ChordQuality((_P1, Interval.m3, Interval.P5), "minor", "m")
ChordQuality.DIMINISHED = ChordQuality((_P1, Interval.m3, Interval.d5), "diminished", "dim")
ChordQuality.AUGMENTED = ChordQuality((_P1, Interval.M3, Interval.A5), "augmented", "aug")
ChordQuality.MAJOR_7 = ChordQuality(
    (_P1, Interval.M3, Interval.P5, Interval.M7), "major 7", "maj7"
)
ChordQuality.MINOR_7 = ChordQuality((_P1, Interval.m3, Interval.P5, Interval.m7), "minor 7", "m7")
ChordQuality.DOMINANT_7 = ChordQuality(
    (_P1, Interval.M3, Interval.P5, Interval.m7), "dominant 7", "7"
)
ChordQuality.DIMINISHED_7 = ChordQuality(
    (_P1, Interval.m3, Interval.d5, Interval.d7), "diminished 7", "dim7"
)
ChordQuality.HALF_DIMINISHED_7 = ChordQuality(
    (_P1, Interval.m3, Interval.d5, Interval.m7), "half-diminished 7", "m7♭5"
)
ChordQuality.SUS2 = ChordQuality((_P1, Interval.M2, Interval.P5), "sus2", "sus2")
ChordQuality.SUS4 = ChordQuality((_P1, Interval.P4, Interval.P5), "sus4", "sus4")

_NAMED_QUALITIES: tuple[ChordQuality, ...] = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
    ChordQuality.AUGMENTED,
    ChordQuality.MAJOR_7,
    ChordQuality.MINOR_7,
    ChordQuality.DOMINANT_7,
    ChordQuality.DIMINISHED_7,
    ChordQuality.HALF_DIMINISHED_7,
    ChordQuality.SUS2,
    ChordQuality.SUS4,
)

_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")
_NUMERAL_SUFFIXES: dict[ChordQuality, str] = {
    ChordQuality.DIMINISHED: "°",
    ChordQuality.AUGMENTED: "+",
    ChordQuality.DOMINANT_7: "7",
    ChordQuality.MAJOR_7: "Δ7",
    ChordQuality.MINOR_7: "7",
    ChordQuality.HALF_DIMINISHED_7: "ø7",
    ChordQuality.DIMINISHED_7: "°7",
}
# Figured-bass shorthand, triads and sevenths alike
_INVERSION_FIGURES = {1: "6", 2: "64", 3: "42"}


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord with a root spelling and quality.

    This is the resolved form - the tones are spelled, so an F# major triad
    has an A#, never a Bb.
    """

    root: Tpc
    quality: ChordQuality
    bass: Tpc | None = None  # For slash chords

    def get_tpcs(self) -> list[Tpc]:
        """Get the spelled chord tones, dropping any with no valid spelling."""
        return self.quality.get_tpcs(self.root)

    @property
    def is_complete(self) -> bool:
        """Whether every chord tone has a valid spelling."""
        return not self.quality.missing_intervals(self.root)

    def __str__(self) -> str:
        result = f"{self.root.spell()}{self.quality.suffix}"
        if self.bass is not None and self.bass != self.root:
            result += f"/{self.bass.spell()}"
        return result


@dataclass(frozen=True)
class RomanNumeral:
    """
    A key-independent chord reference.

    Roman numerals represent chords relative to a key:
    - I, ii, iii, IV, V, vi, vii° in major
    - i, ii°, III, iv, v, VI, VII in minor
    """

    degree: ScaleDegree
    quality: ChordQuality
    inversion: int = 0  # 0 = root, 1 = first, 2 = second, 3 = third (for 7ths)

    # Common Roman numerals (defined after class)
    # Major key
    I: ClassVar[RomanNumeral]  # noqa: E741
    ii: ClassVar[RomanNumeral]
    iii: ClassVar[RomanNumeral]
    IV: ClassVar[RomanNumeral]
    V: ClassVar[RomanNumeral]
    vi: ClassVar[RomanNumeral]
    vii_dim: ClassVar[RomanNumeral]
    V7: ClassVar[RomanNumeral]

    # Minor key
    i: ClassVar[RomanNumeral]
    ii_dim: ClassVar[RomanNumeral]
    III: ClassVar[RomanNumeral]
    iv: ClassVar[RomanNumeral]
    v: ClassVar[RomanNumeral]
    VI: ClassVar[RomanNumeral]
    VII: ClassVar[RomanNumeral]

    def __post_init__(self) -> None:
        high = len(self.quality.intervals) - 1
        if not 0 <= self.inversion <= high:
            raise ValueError(
                ErrorMessages.INVALID_INVERSION.format(high=high, inversion=self.inversion)
            )

    def resolve(self, key: Key) -> Chord | None:
        """
        Resolve this Roman numeral to a concrete chord in a key.

        Args:
            key: The key context

        Returns:
            A spelled Chord, or None if the (altered) root has no spelling
        """
        root = key.resolve_degree(self.degree)
        if root is None:
            return None

        # Inverted chords name their bass; an unspellable bass is left off
        bass = None
        if self.inversion > 0:
            bass = root + self.quality.intervals[self.inversion]

        return Chord(root, self.quality, bass)

    def __str__(self) -> str:
        numeral = _NUMERALS[self.degree.degree - 1]
        if self.quality.third == Interval.m3:
            numeral = numeral.lower()
        accidental = "♭" if self.degree.alteration < 0 else "♯"
        return (
            accidental * abs(self.degree.alteration)
            + numeral
            + _NUMERAL_SUFFIXES.get(self.quality, "")
            + _INVERSION_FIGURES.get(self.inversion, "")
        )


# Define common Roman numerals

# Major key diatonic chords
RomanNumeral.I = RomanNumeral(ScaleDegree(1), ChordQuality.MAJOR)
RomanNumeral.ii = RomanNumeral(ScaleDegree(2), ChordQuality.MINOR)
RomanNumeral.iii = RomanNumeral(ScaleDegree(3), ChordQuality.MINOR)
RomanNumeral.IV = RomanNumeral(ScaleDegree(4), ChordQuality.MAJOR)
RomanNumeral.V = RomanNumeral(ScaleDegree(5), ChordQuality.MAJOR)
RomanNumeral.vi = RomanNumeral(ScaleDegree(6), ChordQuality.MINOR)
RomanNumeral.vii_dim = RomanNumeral(ScaleDegree(7), ChordQuality.DIMINISHED)
RomanNumeral.V7 = RomanNumeral(ScaleDegree(5), ChordQuality.DOMINANT_7)

# Minor key diatonic chords
RomanNumeral.i = RomanNumeral(ScaleDegree(1), ChordQuality.MINOR)
RomanNumeral.ii_dim = RomanNumeral(ScaleDegree(2), ChordQuality.DIMINISHED)
RomanNumeral.III = RomanNumeral(ScaleDegree(3), ChordQuality.MAJOR)
RomanNumeral.iv = RomanNumeral(ScaleDegree(4), ChordQuality.MINOR)
RomanNumeral.v = RomanNumeral(ScaleDegree(5), ChordQuality.MINOR)
RomanNumeral.VI = RomanNumeral(ScaleDegree(6), ChordQuality.MAJOR)
RomanNumeral.VII = RomanNumeral(ScaleDegree(7), ChordQuality.MAJOR)


def get_diatonic_chords(key: Key, sevenths: bool = False) -> list[tuple[str, Chord]]:
    """
    Get all diatonic chords for a key.

    Chords are built by stacking the key's own thirds on each degree, so
    their qualities follow from the spelling (vii° in major, VII in minor).

    Args:
        key: The key
        sevenths: Stack four thirds instead of three

    Returns:
        List of (roman numeral string, chord) tuples
    """
    size = 4 if sevenths else 3
    chords = []
    for degree in range(NUM_STEPS):
        tones = [key.degree_to_tpc(degree + 2 * k) for k in range(size)]
        # Diatonic tones are at most six fifths apart, so every interval exists
        intervals = tuple(Interval(tone.fifths - tones[0].fifths) for tone in tones)
        quality = ChordQuality.from_intervals(intervals) or ChordQuality(intervals)
        numeral = RomanNumeral(ScaleDegree(degree + 1), quality)
        chords.append((str(numeral), Chord(tones[0], quality)))
    return chords
