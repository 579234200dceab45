"""
Pytest configuration and shared fixtures.

The value domains are small and closed, so fixtures hand out every value
and properties are checked exhaustively.
"""

import pytest

from tonality.core import Interval, Key, KeySignature, Mode, Step, Tpc


@pytest.fixture
def all_tpcs() -> list[Tpc]:
    """Every tonal pitch class, Fbb through Bss."""
    return list(Tpc)


@pytest.fixture
def all_intervals() -> list[Interval]:
    """Every interval, diminished second through augmented seventh."""
    return [Interval(fifths) for fifths in range(Interval.MIN.fifths, Interval.MAX.fifths + 1)]


@pytest.fixture
def all_keys() -> list[Key]:
    """Every major and minor key, Cb major through A# minor."""
    return [Key(signature, mode) for signature in KeySignature for mode in Mode]


@pytest.fixture
def all_steps() -> list[Step]:
    """The seven steps."""
    return list(Step)
