"""
Exhaustive property checks.

Tpcs, intervals and keys are small closed sets, so each property is checked
over every value (or every pair) rather than sampled.
"""

from tonality.core import (
    Accidental,
    ChordQuality,
    Interval,
    IntervalQuality,
    Key,
    Prefer,
    Step,
    Tpc,
)


class TestTpcProperties:
    """Properties of tonal pitch classes."""

    def test_step_alteration_round_trip(self, all_tpcs: list[Tpc]) -> None:
        """Decomposing and recomposing gives back the same spelling."""
        for tpc in all_tpcs:
            assert Tpc.from_step_and_alteration(tpc.step, tpc.alteration) == tpc
            assert tpc.step.with_accidental(tpc.alteration) == tpc

    def test_every_step_alteration_pair_exists(self, all_steps: list[Step]) -> None:
        """All 35 step/accidental pairs are distinct spellings."""
        spellings = {
            step.with_accidental(accidental) for step in all_steps for accidental in Accidental
        }
        assert len(spellings) == 35

    def test_inverse_transposition(
        self, all_tpcs: list[Tpc], all_intervals: list[Interval]
    ) -> None:
        """Transposing up and back down returns the original."""
        for tpc in all_tpcs:
            for interval in all_intervals:
                up = tpc + interval
                if up is not None:
                    assert up - interval == tpc
                    assert up - tpc == interval

    def test_transposition_associativity(
        self, all_tpcs: list[Tpc], all_intervals: list[Interval]
    ) -> None:
        """(t + a) + b == t + (a + b) whenever every step succeeds."""
        for tpc in all_tpcs[::4]:
            for a in all_intervals:
                for b in all_intervals:
                    step_a = tpc + a
                    combined = a + b
                    if step_a is None or combined is None:
                        continue
                    assert step_a + b == tpc + combined

    def test_alteration_is_bounded(self, all_steps: list[Step]) -> None:
        """Only alterations of -2..2 semitones have spellings."""
        for step in all_steps:
            for semitones in range(-10, 11):
                result = Tpc.from_step_and_alteration(step, semitones)
                assert (result is not None) == (-2 <= semitones <= 2)

    def test_alter_keeps_step(self, all_tpcs: list[Tpc]) -> None:
        """Altering never changes the letter name."""
        for tpc in all_tpcs:
            for semitones in range(-4, 5):
                altered = tpc.alter(semitones)
                if altered is not None:
                    assert altered.step == tpc.step
                    assert altered.alteration == tpc.alteration + semitones

    def test_enharmonic_distinctness(self) -> None:
        """Enharmonic spellings are equal in pitch but not in value."""
        assert Tpc.Cs != Tpc.Db
        assert Tpc.Cs.pitch_class == Tpc.Db.pitch_class

    def test_enharmonics_share_pitch_class(self, all_tpcs: list[Tpc]) -> None:
        """Every enharmonic sounds the same and is a different spelling."""
        for tpc in all_tpcs:
            others = tpc.enharmonics()
            assert tpc not in others
            assert others == sorted(others)
            for other in others:
                assert other.pitch_class == tpc.pitch_class
                assert other.step != tpc.step

    def test_from_pitch_preserves_pitch_class(self, all_keys: list[Key]) -> None:
        """Spelling a pitch never changes how it sounds."""
        for key in all_keys:
            for prefer in Prefer:
                for pitch in range(12):
                    assert Tpc.from_pitch(pitch, key, prefer).pitch_class == pitch

    def test_from_pitch_flats_and_sharps(self) -> None:
        """Flat and sharp preferences use at most one accidental."""
        for pitch in range(12):
            flat = Tpc.from_pitch(pitch, prefer=Prefer.FLATS)
            sharp = Tpc.from_pitch(pitch, prefer=Prefer.SHARPS)
            assert flat.alteration in (Accidental.FLAT, Accidental.NATURAL)
            assert sharp.alteration in (Accidental.NATURAL, Accidental.SHARP)


class TestIntervalProperties:
    """Properties of intervals."""

    def test_inversion_cancels(self, all_intervals: list[Interval]) -> None:
        """An interval plus its inversion is a unison."""
        for interval in all_intervals:
            assert interval + (-interval) == Interval.UNISON
            assert interval.invert().invert() == interval

    def test_inversion_sizes(self, all_intervals: list[Interval]) -> None:
        """Inverted sizes sum to 9 (or stay at unison)."""
        for interval in all_intervals:
            inverted = interval.invert()
            if interval.size == 1:
                assert inverted.size == 1
            else:
                assert interval.size + inverted.size == 9

    def test_size_and_quality_round_trip(self, all_intervals: list[Interval]) -> None:
        """Every interval is recovered from its size and quality."""
        for interval in all_intervals:
            assert Interval.from_size_and_quality(interval.size, interval.quality) == interval

    def test_perfect_sizes(self, all_intervals: list[Interval]) -> None:
        """Only unisons, fourths and fifths are perfect."""
        for interval in all_intervals:
            if interval.size in (1, 4, 5):
                assert interval.quality not in (IntervalQuality.MAJOR, IntervalQuality.MINOR)
            else:
                assert interval.quality != IntervalQuality.PERFECT

    def test_between_matches_subtraction(
        self, all_tpcs: list[Tpc], all_intervals: list[Interval]
    ) -> None:
        """Interval.between agrees with transposition."""
        for tpc in all_tpcs:
            for interval in all_intervals:
                upper = tpc + interval
                if upper is not None:
                    assert Interval.between(tpc, upper) == interval


class TestKeyProperties:
    """Properties of keys."""

    def test_diatonic_completeness(self, all_keys: list[Key]) -> None:
        """Every key spells each step exactly once."""
        for key in all_keys:
            tpcs = key.get_tpcs()
            assert len(tpcs) == 7
            assert {tpc.step for tpc in tpcs} == set(Step)
            for step in Step:
                spellings = [
                    tpc
                    for tpc in (
                        Tpc.from_step_and_alteration(step, alteration)
                        for alteration in range(-2, 3)
                    )
                    if tpc is not None and key.contains(tpc)
                ]
                assert len(spellings) == 1

    def test_first_degree_is_tonic(self, all_keys: list[Key]) -> None:
        """Degree zero is the tonic."""
        for key in all_keys:
            assert key.degree_to_tpc(0) == key.tonic
            assert key.get_tpcs()[0] == key.tonic

    def test_degrees_wrap(self, all_keys: list[Key]) -> None:
        """Scale degrees repeat every seven steps."""
        for key in all_keys:
            for n in range(-14, 15):
                assert key.scale_degree(n) == key.scale_degree(n % 7)

    def test_with_key_keeps_step(self, all_keys: list[Key], all_steps: list[Step]) -> None:
        """Spelling a step in a key keeps the letter and is diatonic."""
        for key in all_keys:
            for step in all_steps:
                tpc = step.with_key(key)
                assert tpc.step == step
                assert key.contains(tpc)
                assert tpc.alteration_in(key) == 0

    def test_scale_type_agrees(self, all_keys: list[Key]) -> None:
        """A key's spellings match its scale type built on the tonic."""
        for key in all_keys:
            assert key.scale_type.get_tpcs(key.tonic) == key.get_tpcs()

    def test_altered_step_recomposes(self, all_keys: list[Key], all_tpcs: list[Tpc]) -> None:
        """The written accidental (or the key's) recomposes the spelling."""
        for key in all_keys:
            for tpc in all_tpcs:
                step, accidental = tpc.altered_step(key)
                if accidental is None:
                    assert step.with_key(key) == tpc
                else:
                    assert step.with_accidental(accidental) == tpc

    def test_spell_diatonic_pitches(self, all_keys: list[Key]) -> None:
        """Diatonic pitches are spelled the key's way."""
        for key in all_keys:
            for tpc in key.get_tpcs():
                assert key.spell(tpc.pitch_class) == tpc

    def test_relative_round_trip(self, all_keys: list[Key]) -> None:
        """Relative keys share a signature and reverse each other."""
        for key in all_keys:
            assert key.relative().relative() == key
            assert set(key.relative().get_tpcs()) == set(key.get_tpcs())

    def test_parallel_shares_tonic(self, all_keys: list[Key]) -> None:
        """Parallel keys keep the tonic when they exist."""
        for key in all_keys:
            parallel = key.parallel()
            if parallel is not None:
                assert parallel.tonic == key.tonic
                assert parallel.mode != key.mode

    def test_from_tonic_round_trip(self, all_keys: list[Key]) -> None:
        """Keys are recovered from their tonic and mode."""
        for key in all_keys:
            assert Key.from_tonic(key.tonic, key.mode) == key


class TestChordProperties:
    """Properties of chord spelling."""

    def test_f_sharp_dominant_seventh(self) -> None:
        """F♯7 is spelled F♯ A♯ C♯ E."""
        assert ChordQuality.DOMINANT_7.get_tpcs(Tpc.Fs) == [Tpc.Fs, Tpc.As, Tpc.Cs, Tpc.E]

    def test_boundary_transposition(self) -> None:
        """At the sharp edge, raising fails but lowering does not."""
        assert Tpc.Bss + Interval.AUGMENTED_UNISON is None
        assert Tpc.Bss - Interval.MAJOR_SECOND == Tpc.Ass

    def test_chord_tones_keep_sizes(self, all_tpcs: list[Tpc]) -> None:
        """Complete triads spell root, third and fifth on alternate steps."""
        for root in all_tpcs:
            for quality in (ChordQuality.MAJOR, ChordQuality.MINOR, ChordQuality.DIMINISHED):
                if quality.missing_intervals(root):
                    continue
                tones = quality.get_tpcs(root)
                assert [tone.step for tone in tones] == [
                    root.step,
                    root.step.transpose(2),
                    root.step.transpose(4),
                ]

    def test_spelled_tones_count(self, all_tpcs: list[Tpc]) -> None:
        """Spelled and missing tones together cover the quality."""
        for root in all_tpcs:
            quality = ChordQuality.DOMINANT_7
            assert len(quality.get_tpcs(root)) + len(quality.missing_intervals(root)) == 4
