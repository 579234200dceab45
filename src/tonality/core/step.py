"""
Step primitive - the seven diatonic note names.

A Step is a position on the staff: the letter name of a pitch with any
accidental stripped. Steps are cyclic (B is followed by C) and every
operation on them is total.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from tonality.constants import DELTA_SEMITONE, NUM_STEPS, TPC_C

if TYPE_CHECKING:
    from .accidental import Accidental
    from .key import Key
    from .tpc import Tpc


class Step(IntEnum):
    """
    The 7 diatonic steps (0-6), in alphabet order starting from C.

    Octave-independent and accidental-agnostic: C, C# and Cb all have Step.C.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    def transpose(self, steps: int) -> Step:
        """Move by a number of diatonic steps (positive or negative), wrapping."""
        return Step((self.value + steps) % NUM_STEPS)

    def successor(self) -> Step:
        """The next step up (B -> C)."""
        return self.transpose(1)

    def predecessor(self) -> Step:
        """The next step down (C -> B)."""
        return self.transpose(-1)

    def distance_to(self, other: Step) -> int:
        """Ascending diatonic distance to another step (0-6)."""
        return (other.value - self.value) % NUM_STEPS

    @property
    def fifths(self) -> int:
        """Line-of-fifths coordinate of the natural spelling of this step."""
        return TPC_C + (2 * self.value + 1) % NUM_STEPS - 1

    @property
    def natural(self) -> Tpc:
        """The unaltered tonal pitch class of this step."""
        from .tpc import Tpc

        return Tpc(self.fifths)

    def with_accidental(self, accidental: Accidental) -> Tpc:
        """
        The tonal pitch class written with this step and accidental.

        Always succeeds - every step/accidental pair is a valid spelling.
        """
        from .tpc import Tpc

        return Tpc(self.fifths + DELTA_SEMITONE * accidental.value)

    def alter(self, semitones: int) -> Tpc | None:
        """
        The tonal pitch class of this step raised or lowered by semitones.

        Returns None beyond a double sharp or double flat.
        """
        from .tpc import Tpc

        return Tpc.from_step_and_alteration(self, semitones)

    def with_key(self, key: Key) -> Tpc:
        """
        The diatonic spelling of this step in a key.

        Step.F.with_key(Key.major(Tpc.D)) == Tpc.Fs
        """
        from .tpc import Tpc

        low = key.diatonic_low
        return Tpc(low + (self.fifths - low) % NUM_STEPS)

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
