"""
Pydantic models for spelled keys and chords.

This module provides:
- SpelledChord: A chord with its tones spelled out
- SpelledKey: A key with its scale, signature and diatonic chords
- export_yaml: YAML rendering of either
"""

from tonality.models.spelling import SpelledChord, SpelledKey, export_yaml

__all__ = [
    "SpelledChord",
    "SpelledKey",
    "export_yaml",
]
