"""
Key primitives - KeySignature, Mode, Key.

A key is a key signature read in a mode. Its seven diatonic spellings are
seven consecutive coordinates on the line of fifths, so nothing is stored
as a table: every scale degree is derived from the signature arithmetically.

    C major: F C G D A E B          (13..19)
    D major: G D A E B F# C#        (15..21)
    B minor: same collection as D major, read from B
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from tonality.constants import (
    DIATONIC_LOW_OFFSET,
    KEY_MAX,
    KEY_MIN,
    NUM_STEPS,
    RELATIVE_MINOR_OFFSET,
    TPC_C,
)

from .step import Step
from .tpc import Prefer, Tpc

if TYPE_CHECKING:
    from .scale import ScaleDegree, ScaleType


class KeySignature(IntEnum):
    """
    Key signatures, named after their major key.

    The value counts sharps (positive) or flats (negative): D = 2 sharps,
    Eb = 3 flats. Cb (7 flats) and Cs (7 sharps) are the extremes.
    """

    Cb = -7
    Gb = -6
    Db = -5
    Ab = -4
    Eb = -3
    Bb = -2
    F = -1
    C = 0
    G = 1
    D = 2
    A = 3
    E = 4
    B = 5
    Fs = 6
    Cs = 7


class Mode(str, Enum):
    """Major or minor reading of a key signature."""

    MAJOR = "major"
    MINOR = "minor"

    @property
    def other(self) -> Mode:
        """The opposite mode."""
        return Mode.MINOR if self == Mode.MAJOR else Mode.MAJOR


@dataclass(frozen=True)
class Key:
    """
    A key signature plus a mode.

    This is the context for spelling scale degrees and for deciding which
    accidentals need to be written.

    Examples:
        Key(KeySignature.C) = C major
        Key(KeySignature.F, Mode.MINOR) = D minor
        Key.minor(Tpc.Fs) = F# minor (3 sharps)
    """

    signature: KeySignature
    mode: Mode = Mode.MAJOR

    def __post_init__(self) -> None:
        # Accept plain ints for the signature, rejecting anything beyond 7 sharps/flats
        object.__setattr__(self, "signature", KeySignature(self.signature))
        object.__setattr__(self, "mode", Mode(self.mode))

    @classmethod
    def from_tonic(cls, tonic: Tpc, mode: Mode = Mode.MAJOR) -> Key | None:
        """
        Build the key with a given tonic.

        Returns None if the key would need more than seven sharps or flats
        (e.g. G# major, Fb minor).
        """
        signature = tonic.fifths - TPC_C
        if mode == Mode.MINOR:
            signature -= RELATIVE_MINOR_OFFSET
        if not KEY_MIN <= signature <= KEY_MAX:
            return None
        return cls(KeySignature(signature), mode)

    @classmethod
    def major(cls, tonic: Tpc) -> Key | None:
        """The major key on a tonic, or None."""
        return cls.from_tonic(tonic, Mode.MAJOR)

    @classmethod
    def minor(cls, tonic: Tpc) -> Key | None:
        """The minor key on a tonic, or None."""
        return cls.from_tonic(tonic, Mode.MINOR)

    @property
    def tonic(self) -> Tpc:
        """The first scale degree."""
        fifths = TPC_C + self.signature.value
        if self.mode == Mode.MINOR:
            fifths += RELATIVE_MINOR_OFFSET
        return Tpc(fifths)

    @property
    def diatonic_low(self) -> int:
        """Flattest coordinate of the diatonic collection (the 4th of the major key)."""
        return TPC_C + DIATONIC_LOW_OFFSET + self.signature.value

    @property
    def scale_type(self) -> ScaleType:
        """The scale this key spells: major or natural minor."""
        from .scale import ScaleType

        return ScaleType.MAJOR if self.mode == Mode.MAJOR else ScaleType.NATURAL_MINOR

    def scale_degree(self, n: int) -> Step:
        """
        The step n degrees above the tonic (0 = tonic).

        n may be negative or 7 and above; it wraps around the octave.
        """
        return self.tonic.step.transpose(n)

    def degree_to_tpc(self, n: int) -> Tpc:
        """The diatonic spelling of the step n degrees above the tonic (0 = tonic)."""
        return self.scale_degree(n).with_key(self)

    def resolve_degree(self, degree: ScaleDegree) -> Tpc | None:
        """
        Resolve a 1-based, possibly altered scale degree to a Tpc.

        Alterations are relative to the key: b7 in C major is Bb, #4 is F#,
        b3 in C# major is E. Returns None beyond double sharp / double flat.
        """
        return self.degree_to_tpc(degree.degree - 1).alter(degree.alteration)

    def get_tpcs(self) -> list[Tpc]:
        """All 7 diatonic tonal pitch classes, starting from the tonic."""
        return [self.degree_to_tpc(n) for n in range(NUM_STEPS)]

    def contains(self, tpc: Tpc) -> bool:
        """Whether a spelling is diatonic in this key."""
        return self.diatonic_low <= tpc.fifths < self.diatonic_low + NUM_STEPS

    def accidentals(self) -> list[Tpc]:
        """
        The sharps or flats of the key signature, in the order they are written.

        D major -> [F#, C#]; Eb major -> [Bb, Eb, Ab]
        """
        count = self.signature.value
        if count >= 0:
            return [Tpc(Tpc.Fs.value + i) for i in range(count)]
        return [Tpc(Tpc.Bb.value - i) for i in range(-count)]

    def relative(self) -> Key:
        """Same signature, other mode (C major <-> A minor)."""
        return Key(self.signature, self.mode.other)

    def parallel(self) -> Key | None:
        """Same tonic, other mode (C major <-> C minor), or None if out of range."""
        return Key.from_tonic(self.tonic, self.mode.other)

    def spell(self, pitch: int, prefer: Prefer = Prefer.NEAREST) -> Tpc:
        """Spell a 12-tone pitch class in the context of this key."""
        return Tpc.from_pitch(pitch, self, prefer)

    def __str__(self) -> str:
        return f"{self.tonic.spell()} {self.mode.value}"

    def __repr__(self) -> str:
        return f"Key({self.signature!r}, {self.mode!r})"
