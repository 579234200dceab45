"""
Scale primitives - ScaleDegree, ScaleType.

Scales are spelled interval patterns from a tonic. Because every interval
keeps its diatonic size, a scale built this way always has exactly one
spelling per step - D harmonic minor gets a C#, never a Db.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tonality.constants import DELTA_SEMITONE, NUM_STEPS, ErrorMessages

from .interval import Interval
from .tpc import Tpc


@dataclass(frozen=True)
class ScaleDegree:
    """
    A scale degree with optional alteration.

    Degree is 1-7 (tonic to leading tone).
    Alteration is semitones relative to the key: -1 = flat, +1 = sharp, 0 = natural.

    Examples:
        ScaleDegree(1) = tonic
        ScaleDegree(5) = dominant
        ScaleDegree(7, -1) = flat 7 (Bb in C major, A in B major)
        ScaleDegree(4, +1) = raised 4 (lydian)
    """

    degree: int  # 1-7
    alteration: int = 0  # -1 = flat, +1 = sharp

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= NUM_STEPS:
            raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=self.degree))

    def __str__(self) -> str:
        if self.alteration == 0:
            return str(self.degree)
        elif self.alteration > 0:
            return f"{'♯' * self.alteration}{self.degree}"
        else:
            return f"{'♭' * -self.alteration}{self.degree}"

    def __repr__(self) -> str:
        if self.alteration == 0:
            return f"ScaleDegree({self.degree})"
        return f"ScaleDegree({self.degree}, {self.alteration})"


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its intervals from the tonic.

    The intervals are cumulative (measured from the tonic, not from the
    previous degree) and hold one of each diatonic size, in order:
    a major scale is P1 M2 M3 P4 P5 M6 M7.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""

    # Common scale types (defined after class)
    MAJOR: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    MELODIC_MINOR: ClassVar[ScaleType]
    DORIAN: ClassVar[ScaleType]
    PHRYGIAN: ClassVar[ScaleType]
    LYDIAN: ClassVar[ScaleType]
    MIXOLYDIAN: ClassVar[ScaleType]
    LOCRIAN: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        # Validate one interval per diatonic size, unison through seventh
        sizes = [interval.size for interval in self.intervals]
        if sizes != list(range(1, NUM_STEPS + 1)):
            raise ValueError(ErrorMessages.INVALID_SCALE.format(sizes=sizes))

    def degree_interval(self, degree: ScaleDegree) -> Interval | None:
        """
        Get the interval from the tonic to a scale degree.

        Args:
            degree: The scale degree (1-7 with optional alteration)

        Returns:
            The spelled interval, or None if the alteration makes it doubly altered
        """
        interval = self.intervals[degree.degree - 1]
        if degree.alteration == 0:
            return interval
        return Interval.from_fifths(interval.fifths + DELTA_SEMITONE * degree.alteration)

    def get_tpcs(self, root: Tpc) -> list[Tpc] | None:
        """
        Spell all 7 degrees of this scale from a root.

        Returns None if any degree has no spelling (B♯♯ lydian would need E♯♯♯).
        """
        tpcs = [root + interval for interval in self.intervals]
        if any(tpc is None for tpc in tpcs):
            return None
        return [tpc for tpc in tpcs if tpc is not None]

    def __str__(self) -> str:
        return self.name or f"ScaleType({', '.join(i.short_name for i in self.intervals)})"

    def __repr__(self) -> str:
        if self.name:
            return f"ScaleType.{self.name.upper().replace(' ', '_')}"
        return f"ScaleType({self.intervals!r})"


# Define scale types using interval shorthand
_P1, _P4, _P5 = Interval.P1, Interval.P4, Interval.P5
_m2, _M2 = Interval.m2, Interval.M2
_m3, _M3 = Interval.m3, Interval.M3
_A4, _d5 = Interval.A4, Interval.d5
_m6, _M6 = Interval.m6, Interval.M6
_m7, _M7 = Interval.m7, Interval.M7

ScaleType.MAJOR = ScaleType((_P1, _M2, _M3, _P4, _P5, _M6, _M7), "major")
ScaleType.NATURAL_MINOR = ScaleType((_P1, _M2, _m3, _P4, _P5, _m6, _m7), "natural minor")
ScaleType.HARMONIC_MINOR = ScaleType((_P1, _M2, _m3, _P4, _P5, _m6, _M7), "harmonic minor")
ScaleType.MELODIC_MINOR = ScaleType((_P1, _M2, _m3, _P4, _P5, _M6, _M7), "melodic minor")
ScaleType.DORIAN = ScaleType((_P1, _M2, _m3, _P4, _P5, _M6, _m7), "dorian")
ScaleType.PHRYGIAN = ScaleType((_P1, _m2, _m3, _P4, _P5, _m6, _m7), "phrygian")
ScaleType.LYDIAN = ScaleType((_P1, _M2, _M3, _A4, _P5, _M6, _M7), "lydian")
ScaleType.MIXOLYDIAN = ScaleType((_P1, _M2, _M3, _P4, _P5, _M6, _m7), "mixolydian")
ScaleType.LOCRIAN = ScaleType((_P1, _m2, _m3, _P4, _d5, _m6, _m7), "locrian")
