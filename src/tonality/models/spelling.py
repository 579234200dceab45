"""
Spelling snapshots - serializable views of keys and chords.

The core types are plain values; these models are the exchange form used
for reports and fixtures. Every spelling is stored as text ("F♯", "B♭♭")
and validated against the known tonal pitch classes.
"""

from __future__ import annotations

import logging

import yaml
from pydantic import BaseModel, Field, field_validator

from tonality.constants import KEY_MAX, KEY_MIN, NUM_STEPS
from tonality.core import Chord, Key, Mode, Tpc, get_diatonic_chords

logger = logging.getLogger(__name__)

_KNOWN_SPELLINGS = frozenset(tpc.spell() for tpc in Tpc)


def _validate_spellings(values: list[str]) -> list[str]:
    for value in values:
        if value not in _KNOWN_SPELLINGS:
            raise ValueError(f"Unknown spelling: '{value}'")
    return values


class SpelledChord(BaseModel):
    """A chord with its tones spelled out."""

    symbol: str = Field(..., description="Chord symbol (e.g., 'F♯7')")
    root: str = Field(..., description="Root spelling")
    quality: str = Field(..., description="Quality name (e.g., 'dominant 7')")
    tones: list[str] = Field(default_factory=list, description="Spelled tones in chord order")
    missing: list[str] = Field(
        default_factory=list,
        description="Intervals with no valid spelling over the root (e.g., 'A5')",
    )

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Validate root spelling."""
        _validate_spellings([v])
        return v

    @field_validator("tones")
    @classmethod
    def validate_tones(cls, v: list[str]) -> list[str]:
        """Validate tone spellings."""
        return _validate_spellings(v)

    @classmethod
    def from_chord(cls, chord: Chord) -> SpelledChord:
        """Snapshot a chord."""
        return cls(
            symbol=str(chord),
            root=chord.root.spell(),
            quality=str(chord.quality),
            tones=[tpc.spell() for tpc in chord.get_tpcs()],
            missing=[i.short_name for i in chord.quality.missing_intervals(chord.root)],
        )


class SpelledKey(BaseModel):
    """A key with its scale, signature and diatonic chords spelled out."""

    name: str = Field(..., description="Key name (e.g., 'F♯ minor')")
    tonic: str = Field(..., description="Tonic spelling")
    mode: Mode = Field(..., description="Major or minor")
    signature: int = Field(..., ge=KEY_MIN, le=KEY_MAX, description="Sharps (+) or flats (-)")
    accidentals: list[str] = Field(default_factory=list, description="Signature accidentals")
    degrees: list[str] = Field(
        ..., min_length=NUM_STEPS, max_length=NUM_STEPS, description="Scale spellings"
    )
    chords: dict[str, SpelledChord] = Field(
        default_factory=dict, description="Diatonic chords by Roman numeral"
    )

    model_config = {"frozen": True}

    @field_validator("tonic")
    @classmethod
    def validate_tonic(cls, v: str) -> str:
        """Validate tonic spelling."""
        _validate_spellings([v])
        return v

    @field_validator("accidentals", "degrees")
    @classmethod
    def validate_spellings(cls, v: list[str]) -> list[str]:
        """Validate scale and signature spellings."""
        return _validate_spellings(v)

    @classmethod
    def from_key(cls, key: Key, sevenths: bool = False) -> SpelledKey:
        """Snapshot a key, including its diatonic triads (or sevenths)."""
        return cls(
            name=str(key),
            tonic=key.tonic.spell(),
            mode=key.mode,
            signature=key.signature.value,
            accidentals=[tpc.spell() for tpc in key.accidentals()],
            degrees=[tpc.spell() for tpc in key.get_tpcs()],
            chords={
                numeral: SpelledChord.from_chord(chord)
                for numeral, chord in get_diatonic_chords(key, sevenths=sevenths)
            },
        )


def export_yaml(model: BaseModel) -> str:
    """
    Render a spelling snapshot as YAML.

    Args:
        model: Any spelling model

    Returns:
        YAML text (keys in field order, spellings left unescaped)
    """
    logger.debug("Exporting %s to YAML", type(model).__name__)
    data = model.model_dump(mode="json")
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
