#!/usr/bin/env python3
"""
Example: Spell chords and keys on the line of fifths.

This demonstrates fallible transposition - the core of the system.
Chord tones are computed by transposing a root by each interval in turn;
tones that would need a triple sharp or flat are dropped.

Usage:
    python examples/spell_chords.py
"""

from tonality import ChordQuality, Interval, Key, Mode, Tpc, get_diatonic_chords
from tonality.models import SpelledKey, export_yaml


def main() -> None:
    """Spell a few chords and keys."""
    # Example 1: F# dominant seventh, one interval at a time
    print("F♯ + [P1, M3, P5, m7]:")
    intervals = [
        Interval.UNISON,
        Interval.MAJOR_THIRD,
        Interval.PERFECT_FIFTH,
        Interval.MINOR_SEVENTH,
    ]
    tones = [tpc for tpc in (Tpc.Fs + interval for interval in intervals) if tpc is not None]
    print(f"  {' '.join(tpc.spell() for tpc in tones)}")

    # Example 2: Spelling runs out at the edge of the window
    print("\nAugmented triads, sharpward:")
    for root in (Tpc.E, Tpc.Bs, Tpc.Ess):
        tpcs = ChordQuality.AUGMENTED.get_tpcs(root)
        missing = ChordQuality.AUGMENTED.missing_intervals(root)
        note = f" (no {', '.join(str(i) for i in missing)})" if missing else ""
        print(f"  {root.spell()}: {' '.join(t.spell() for t in tpcs)}{note}")

    # Example 3: Diatonic chords in a sharp minor key
    key = Key.from_tonic(Tpc.Gs, Mode.MINOR)
    if key is not None:
        print(f"\nDiatonic sevenths in {key}:")
        for numeral, chord in get_diatonic_chords(key, sevenths=True):
            print(f"  {numeral:6} {chord!s:8} {' '.join(t.spell() for t in chord.get_tpcs())}")

    # Example 4: A full snapshot as YAML
    e_flat = Key.major(Tpc.Eb)
    if e_flat is not None:
        print()
        print(export_yaml(SpelledKey.from_key(e_flat)))


if __name__ == "__main__":
    main()
