"""
Tests for the spelling models.

Tests cover:
- SpelledChord (models/spelling.py)
- SpelledKey (models/spelling.py)
- export_yaml
"""

import logging

import pytest
import yaml
from pydantic import ValidationError

from tonality.core import Chord, ChordQuality, Key, KeySignature, Mode, Tpc
from tonality.models import SpelledChord, SpelledKey, export_yaml


class TestSpelledChord:
    """Tests for SpelledChord model."""

    def test_from_chord(self) -> None:
        """Snapshot a complete chord."""
        spelled = SpelledChord.from_chord(Chord(Tpc.Fs, ChordQuality.DOMINANT_7))
        assert spelled.symbol == "F♯7"
        assert spelled.root == "F♯"
        assert spelled.quality == "dominant 7"
        assert spelled.tones == ["F♯", "A♯", "C♯", "E"]
        assert spelled.missing == []

    def test_from_incomplete_chord(self) -> None:
        """Unspellable tones are reported as missing intervals."""
        spelled = SpelledChord.from_chord(Chord(Tpc.Ess, ChordQuality.AUGMENTED))
        assert spelled.tones == ["E♯♯"]
        assert spelled.missing == ["M3", "A5"]

    def test_unknown_root(self) -> None:
        """Roots must be real spellings."""
        with pytest.raises(ValidationError):
            SpelledChord(symbol="H", root="H", quality="major")

    def test_unknown_tone(self) -> None:
        """Tones must be real spellings."""
        with pytest.raises(ValidationError):
            SpelledChord(symbol="C", root="C", quality="major", tones=["C", "E", "G♯♯♯"])

    def test_frozen(self) -> None:
        """Snapshots are immutable."""
        spelled = SpelledChord.from_chord(Chord(Tpc.C, ChordQuality.MAJOR))
        with pytest.raises(ValidationError):
            spelled.root = "D"  # type: ignore[misc]


class TestSpelledKey:
    """Tests for SpelledKey model."""

    def test_from_key(self) -> None:
        """Snapshot a flat key."""
        spelled = SpelledKey.from_key(Key(KeySignature.Eb))
        assert spelled.name == "E♭ major"
        assert spelled.tonic == "E♭"
        assert spelled.mode == Mode.MAJOR
        assert spelled.signature == -3
        assert spelled.accidentals == ["B♭", "E♭", "A♭"]
        assert spelled.degrees == ["E♭", "F", "G", "A♭", "B♭", "C", "D"]
        assert list(spelled.chords) == ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
        assert spelled.chords["V"].tones == ["B♭", "D", "F"]

    def test_from_minor_key_sevenths(self) -> None:
        """Seventh chords in a sharp minor key."""
        spelled = SpelledKey.from_key(Key(KeySignature.E, Mode.MINOR), sevenths=True)
        assert spelled.name == "C♯ minor"
        assert spelled.chords["i7"].tones == ["C♯", "E", "G♯", "B"]
        assert spelled.chords["VIIΔ7"].symbol == "Bmaj7"

    def test_signature_range(self) -> None:
        """Signatures beyond seven sharps or flats are rejected."""
        with pytest.raises(ValidationError):
            SpelledKey(
                name="G♯ major",
                tonic="G♯",
                mode=Mode.MAJOR,
                signature=8,
                degrees=["G♯", "A♯", "B♯", "C♯", "D♯", "E♯", "F♯♯"],
            )

    def test_degree_count(self) -> None:
        """A key has exactly seven degrees."""
        with pytest.raises(ValidationError):
            SpelledKey(
                name="C major",
                tonic="C",
                mode=Mode.MAJOR,
                signature=0,
                degrees=["C", "D", "E"],
            )

    def test_mode_from_text(self) -> None:
        """Modes are parsed from their values."""
        spelled = SpelledKey(
            name="A minor",
            tonic="A",
            mode="minor",  # type: ignore[arg-type]
            signature=0,
            degrees=["A", "B", "C", "D", "E", "F", "G"],
        )
        assert spelled.mode == Mode.MINOR


class TestExportYaml:
    """Tests for export_yaml."""

    def test_export_key(self) -> None:
        """Spellings are written as readable text."""
        text = export_yaml(SpelledKey.from_key(Key(KeySignature.Eb)))
        assert "name: E♭ major" in text
        assert "mode: major" in text
        assert "\\u" not in text

    def test_export_round_trip(self) -> None:
        """The YAML loads back to the model's data."""
        spelled = SpelledKey.from_key(Key(KeySignature.Fs, Mode.MINOR))
        data = yaml.safe_load(export_yaml(spelled))
        assert data == spelled.model_dump(mode="json")
        assert SpelledKey.model_validate(data) == spelled

    def test_export_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        """Export is logged at DEBUG with the model name."""
        with caplog.at_level(logging.DEBUG, logger="tonality.models.spelling"):
            export_yaml(SpelledChord.from_chord(Chord(Tpc.C, ChordQuality.MAJOR)))
        assert "Exporting SpelledChord to YAML" in caplog.text

    def test_field_order(self) -> None:
        """Fields keep their declared order."""
        text = export_yaml(SpelledChord.from_chord(Chord(Tpc.C, ChordQuality.MAJOR)))
        keys = [line.split(":")[0] for line in text.splitlines() if not line.startswith(" ")]
        assert keys[:3] == ["symbol", "root", "quality"]
