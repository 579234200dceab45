"""
Tonal pitch class primitive - Tpc.

A Tpc is a pitch class together with its spelling: C# and Db sound the same
but are different Tpcs. Each Tpc is a single coordinate on the line of
fifths, where moving +1 goes up a perfect fifth (F C G D A E B F# ...).

Coordinates follow the common tonal pitch class numbering: C = 14, and the
supported window runs from Fbb (-1) to Bss (33) - every step with every
alteration from double flat to double sharp.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from tonality.constants import (
    ALTERATION_MAX,
    ALTERATION_MIN,
    DELTA_ENHARMONIC,
    DELTA_SEMITONE,
    NUM_STEPS,
    TPC_C,
    TPC_MAX,
    TPC_MIN,
)

from .accidental import Accidental
from .interval import Interval
from .step import Step

if TYPE_CHECKING:
    from .key import Key

# 7 is its own inverse modulo 12: fifths = 7 * semitones (mod 12)
_SEMITONES_PER_FIFTH = 7


class Prefer(str, Enum):
    """Spelling preference when turning a 12-tone pitch class into a Tpc."""

    FLATS = "flats"  # naturals and single flats (Gb..B)
    NEAREST = "nearest"  # closest to the key on the line of fifths
    SHARPS = "sharps"  # naturals and single sharps (F..A#)


class Tpc(IntEnum):
    """
    The 35 tonal pitch classes, ordered by position on the line of fifths.

    Octave-independent and spelling-aware: Tpc.Cs != Tpc.Db.
    Arithmetic with intervals is fallible and returns None whenever the
    result would need a triple sharp or triple flat.

    Members are plain ints underneath, like any IntEnum: Tpc.Cbb == Step.C
    and Tpc.C + 1 == 15. Compare spellings with `is` or against other Tpcs,
    and move them with Intervals, not ints.
    """

    Fbb = -1
    Cbb = 0
    Gbb = 1
    Dbb = 2
    Abb = 3
    Ebb = 4
    Bbb = 5
    Fb = 6
    Cb = 7
    Gb = 8
    Db = 9
    Ab = 10
    Eb = 11
    Bb = 12
    F = 13
    C = 14
    G = 15
    D = 16
    A = 17
    E = 18
    B = 19
    Fs = 20
    Cs = 21
    Gs = 22
    Ds = 23
    As = 24
    Es = 25
    Bs = 26
    Fss = 27
    Css = 28
    Gss = 29
    Dss = 30
    Ass = 31
    Ess = 32
    Bss = 33

    @classmethod
    def from_fifths(cls, fifths: int) -> Tpc | None:
        """Look up a coordinate on the line of fifths, or None outside Fbb..Bss."""
        if not TPC_MIN <= fifths <= TPC_MAX:
            return None
        return cls(fifths)

    @classmethod
    def from_step_and_alteration(cls, step: Step, alteration: int) -> Tpc | None:
        """
        Compose a step and an alteration in semitones.

        Args:
            step: The letter name
            alteration: Semitones (an Accidental or a plain int)

        Returns:
            The spelled Tpc, or None beyond double sharp / double flat
        """
        if not ALTERATION_MIN <= alteration <= ALTERATION_MAX:
            return None
        return cls.from_fifths(step.fifths + DELTA_SEMITONE * int(alteration))

    @classmethod
    def from_pitch(
        cls,
        pitch: int,
        key: Key | None = None,
        prefer: Prefer = Prefer.NEAREST,
    ) -> Tpc:
        """
        Spell a 12-tone pitch class (or MIDI note number) as a Tpc.

        Each preference selects a window of 12 consecutive coordinates, which
        holds exactly one spelling of every pitch class:
        - FLATS: Gb..B
        - SHARPS: F..A#
        - NEAREST: four fifths below to seven fifths above the key's tonic
          (C major when no key is given), so in C major: Ab Eb Bb F C G D A E B F# C#

        Always succeeds.
        """
        if prefer == Prefer.FLATS:
            low = cls.Gb.value
        elif prefer == Prefer.SHARPS:
            low = cls.F.value
        else:
            tonic = key.tonic.value if key is not None else TPC_C
            low = tonic - 4
        target = TPC_C + _SEMITONES_PER_FIFTH * (pitch % 12)
        return cls(low + (target - low) % DELTA_ENHARMONIC)

    @property
    def fifths(self) -> int:
        """Coordinate on the line of fifths (C = 14)."""
        return self.value

    @property
    def step(self) -> Step:
        """The letter name, with the accidental stripped."""
        return Step((self.value - TPC_C) * 4 % NUM_STEPS)

    @property
    def alteration(self) -> Accidental:
        """The accidental applied to the step."""
        return Accidental((self.value + 1) // DELTA_SEMITONE - 2)

    @property
    def accidental(self) -> Accidental:
        """Alias of alteration."""
        return self.alteration

    @property
    def pitch_class(self) -> int:
        """Sounding pitch class in 12-tone equal temperament (C = 0)."""
        return (self.value - TPC_C) * _SEMITONES_PER_FIFTH % 12

    def transpose(self, interval: Interval) -> Tpc | None:
        """
        Transpose by a spelled interval.

        Returns None if the result has no spelling, e.g. B## up a major third.
        """
        return Tpc.from_fifths(self.value + interval.fifths)

    def alter(self, semitones: int) -> Tpc | None:
        """Raise or lower by semitones keeping the step (A -> Ab), or None."""
        return Tpc.from_fifths(self.value + DELTA_SEMITONE * semitones)

    def enharmonic(self, other: Tpc) -> bool:
        """Whether the two spellings sound the same in 12-tone equal temperament."""
        return (self.value - other.value) % DELTA_ENHARMONIC == 0

    def enharmonics(self) -> list[Tpc]:
        """The other spellings of this pitch class, flattest first (C -> [Dbb, B#])."""
        return [
            tpc
            for tpc in Tpc
            if tpc is not self and (tpc.value - self.value) % DELTA_ENHARMONIC == 0
        ]

    def alteration_in(self, key: Key) -> int:
        """
        Alteration relative to the step's diatonic spelling in a key.

        Not bounded like an Accidental: Fbb in C# major is -3.
        """
        return (self.value - key.diatonic_low) // DELTA_SEMITONE

    def altered_step(self, key: Key | None = None) -> tuple[Step, Accidental | None]:
        """
        Split into the step and the accidental that has to be written.

        The accidental is None when the key signature already implies the
        spelling (or, without a key, when the Tpc is natural).
        """
        if key is None:
            alteration = self.alteration
            return self.step, None if alteration == Accidental.NATURAL else alteration
        if key.contains(self):
            return self.step, None
        return self.step, self.alteration

    def spell(self, use_unicode: bool = True) -> str:
        """Human-readable name, e.g. 'F♯' or 'B♭♭' ('F#', 'Bbb' in ASCII)."""
        alteration = self.alteration
        if alteration == Accidental.NATURAL:
            return self.step.name
        suffix = alteration.symbol if use_unicode else alteration.ascii_symbol
        return f"{self.step.name}{suffix}"

    def __add__(self, other: object) -> Tpc | None:  # type: ignore[override]
        if not isinstance(other, Interval):
            return NotImplemented
        return self.transpose(other)

    def __sub__(self, other: object) -> Tpc | Interval | None:  # type: ignore[override]
        """Tpc - Interval transposes down; Tpc - Tpc is the interval from other up to self."""
        if isinstance(other, Interval):
            return self.transpose(-other)
        if isinstance(other, Tpc):
            return Interval.from_fifths(self.value - other.value)
        return NotImplemented

    def __str__(self) -> str:
        return self.spell()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
