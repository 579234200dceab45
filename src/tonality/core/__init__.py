"""
Core tonality primitives - the line-of-fifths layer.

These are the value types everything else composes on:
- Step: The 7 diatonic note names (C-B)
- Accidental: Bounded alteration, double flat to double sharp
- Tpc: Tonal pitch class - a spelled pitch class on the line of fifths
- Interval: Spelled interval, a line-of-fifths offset
- Key: Key signature + mode, resolves degrees to spellings
- ScaleDegree: Position in a scale (1-7) with alteration
- ScaleType: Spelled interval pattern defining a scale
- ChordQuality: Spelled interval stacks defining chord types
- Chord: Concrete chord with a spelled root and quality
- RomanNumeral: Key-independent chord references
"""

from .accidental import Accidental, Alteration
from .chord import Chord, ChordQuality, RomanNumeral, get_diatonic_chords
from .interval import Interval, IntervalQuality
from .key import Key, KeySignature, Mode
from .scale import ScaleDegree, ScaleType
from .step import Step
from .tpc import Prefer, Tpc

__all__ = [
    # Step
    "Step",
    # Accidental
    "Accidental",
    "Alteration",
    # Tpc
    "Tpc",
    "Prefer",
    # Interval
    "Interval",
    "IntervalQuality",
    # Key
    "Key",
    "KeySignature",
    "Mode",
    # Scale
    "ScaleDegree",
    "ScaleType",
    # Chord
    "ChordQuality",
    "Chord",
    "RomanNumeral",
    "get_diatonic_chords",
]
