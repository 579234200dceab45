"""
tonality - spelling-aware pitch arithmetic.

Tonal pitch classes, intervals and keys as positions on the line of fifths.
Every operation that could need a triple sharp or flat returns None instead.

    >>> from tonality import Interval, Tpc
    >>> Tpc.Fs + Interval.MAJOR_THIRD
    <Tpc.As: 24>
    >>> Tpc.Bss + Interval.MAJOR_THIRD is None
    True
"""

from tonality.core import (
    Accidental,
    Alteration,
    Chord,
    ChordQuality,
    Interval,
    IntervalQuality,
    Key,
    KeySignature,
    Mode,
    Prefer,
    RomanNumeral,
    ScaleDegree,
    ScaleType,
    Step,
    Tpc,
    get_diatonic_chords,
)

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "Alteration",
    "Chord",
    "ChordQuality",
    "Interval",
    "IntervalQuality",
    "Key",
    "KeySignature",
    "Mode",
    "Prefer",
    "RomanNumeral",
    "ScaleDegree",
    "ScaleType",
    "Step",
    "Tpc",
    "get_diatonic_chords",
    "__version__",
]
