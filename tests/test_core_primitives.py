"""
Tests for the pitch model.

Tests cover:
- PitchClass and pitch name parsing (notation.py)
- Pitch naming, parsing and overtones (pitch.py)
- Interval naming, arithmetic and rationalization (interval.py)
"""

import pytest

from chuk_mcp_harmony.core import (
    CHROMATIC_INTERVALS,
    Interval,
    InvalidArgumentError,
    ParseError,
    Pitch,
    PitchClass,
    Rational,
    TuningConfiguration,
    frequency_from_key,
    frequency_to_name,
    key_from_frequency,
    name_from_ratio,
    name_to_frequency,
    parse_pitch_name,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_from_midi(self) -> None:
        assert PitchClass.from_midi(60) == PitchClass.C
        assert PitchClass.from_midi(69) == PitchClass.A

    def test_spell(self) -> None:
        """Sharp names by default, flat names on request."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.Cs.spell(prefer_flats=True) == "Db"
        assert PitchClass.E.spell(prefer_flats=True) == "E"


class TestPitchNames:
    """Tests for scientific pitch name parsing."""

    def test_plain_name(self) -> None:
        parsed = parse_pitch_name("A4")
        assert parsed.letter == "A"
        assert parsed.alteration == 0
        assert parsed.octave == 4
        assert parsed.midi == 69

    def test_accidentals(self) -> None:
        assert parse_pitch_name("C#3").midi == 49
        assert parse_pitch_name("Db3").midi == 49
        assert parse_pitch_name("Cx4").midi == 62
        assert parse_pitch_name("Bbb3").midi == 57

    def test_negative_octave(self) -> None:
        parsed = parse_pitch_name("Bb-1")
        assert parsed.octave == -1
        assert parsed.midi == 10

    def test_cents_suffix(self) -> None:
        assert parse_pitch_name("Ab3-20c").cents == -20.0
        assert parse_pitch_name("A4+12.5c").cents == 12.5

    def test_missing_letter(self) -> None:
        with pytest.raises(ParseError, match="note letter"):
            parse_pitch_name("H4")
        with pytest.raises(ParseError):
            parse_pitch_name("4")

    def test_missing_octave(self) -> None:
        with pytest.raises(ParseError, match="octave"):
            parse_pitch_name("C#")

    def test_malformed(self) -> None:
        with pytest.raises(ParseError):
            parse_pitch_name("C4+20")


class TestPitch:
    """Tests for Pitch."""

    def test_reference_pitch(self) -> None:
        """A4 is exactly the reference frequency."""
        assert Pitch.parse("A4").frequency == 440.0
        assert name_to_frequency("A4") == 440.0

    def test_middle_c(self) -> None:
        assert Pitch.parse("C4").frequency == pytest.approx(261.6255653, rel=1e-9)

    def test_derived_name(self) -> None:
        """Names are derived from the frequency when not given."""
        assert Pitch(440.0).name == "A4"
        assert Pitch(261.6255653).name == "C4"

    def test_cents_suffix_beyond_limit(self) -> None:
        """Deviations above 6 cents are shown as a suffix."""
        assert frequency_to_name(445.0) == "A4+20c"
        assert frequency_to_name(441.0) == "A4"

    def test_cents_name_round_trip(self) -> None:
        """A name with a cents suffix parses to the frequency it names."""
        pitch = Pitch.parse("A4+20c")
        assert pitch.frequency == pytest.approx(440.0 * 2 ** (20 / 1200))
        assert Pitch.from_frequency(pitch.frequency).name == "A4+20c"

    def test_given_name_kept(self) -> None:
        assert Pitch.parse("Bb3").name == "Bb3"
        assert str(Pitch.parse("Bb3")) == "Bb3"

    def test_equality_ignores_name(self) -> None:
        """Pitches are equal when their frequencies are."""
        assert Pitch.parse("A#4") == Pitch.parse("Bb4")
        assert Pitch(440.0, "concert A") == Pitch.parse("A4")
        assert len({Pitch.parse("A#4"), Pitch.parse("Bb4")}) == 1

    def test_equality_to_ten_significant_digits(self) -> None:
        """Frequencies agreeing to 10 significant digits are the same pitch."""
        assert Pitch(440.0) == Pitch(440.0 + 1e-9)
        assert len({Pitch(440.0), Pitch(440.0 + 1e-9)}) == 1
        assert Pitch(440.0) != Pitch(440.001)

    def test_ordering(self) -> None:
        assert Pitch.parse("C4") < Pitch.parse("D4") < Pitch.parse("C5")

    def test_midi_and_deviation(self) -> None:
        pitch = Pitch(445.0)
        assert pitch.midi == 69
        assert pitch.cents_deviation == pytest.approx(19.56, abs=0.01)

    def test_non_positive_frequency(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Pitch(0.0)
        with pytest.raises(InvalidArgumentError):
            frequency_to_name(-1.0)

    def test_up_and_down(self) -> None:
        c4 = Pitch.parse("C4")
        assert c4.up(Interval.P5) == Pitch.parse("G4")
        assert c4.up(Interval.P5).name == "G4"
        assert c4.down(Interval.O8) == Pitch.parse("C3")

    def test_transpose(self) -> None:
        assert Pitch.parse("A4").transpose(12).frequency == pytest.approx(880.0)
        assert Pitch.parse("A4").transpose(-2).name == "G4"

    def test_overtones(self) -> None:
        """Overtone n is frequency * (n + 1); negative numbers are undertones."""
        pitch = Pitch(100.0)
        assert pitch.overtone(0) == pitch
        assert pitch.overtone(1).frequency == 200.0
        assert pitch.overtone(2).frequency == 300.0
        assert pitch.overtone(-1).frequency == 50.0
        assert pitch.undertone(2).frequency == pytest.approx(100.0 / 3)

    def test_piano_keys(self) -> None:
        assert key_from_frequency(440.0) == 49
        assert frequency_from_key(1) == pytest.approx(27.5)
        assert frequency_from_key(88) == pytest.approx(4186.009, rel=1e-6)

    def test_flat_spelling_tuning(self, baroque_tuning: TuningConfiguration) -> None:
        """A415 tunings name 440 Hz as a flat."""
        assert Pitch.from_frequency(415.0, baroque_tuning).name == "A4"
        assert Pitch.from_frequency(440.0, baroque_tuning).name == "Bb4"


class TestInterval:
    """Tests for Interval."""

    def test_normalized_above_unison(self) -> None:
        """Ratios below 1 are inverted."""
        assert Interval(0.5) == Interval.OCTAVE
        assert Interval(2 / 3).ratio == pytest.approx(1.5)

    def test_non_positive_ratio(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Interval(0.0)

    def test_chromatic_names(self) -> None:
        names = [interval.name for interval in CHROMATIC_INTERVALS]
        assert names == [
            "U1", "m2", "M2", "m3", "M3", "P4", "TT", "P5", "m6", "M6", "m7", "M7",
        ]  # fmt: skip

    def test_just_names(self) -> None:
        """Just ratios get a cents suffix when audibly off equal temperament."""
        assert Interval(1.5).name == "P5"
        assert Interval(1.25).name == "M3-14c"
        assert name_from_ratio(1.25, perceptual_limit_cents=20.0) == "M3"

    def test_compound_names(self) -> None:
        """Degree numbers grow by 7 per octave."""
        assert Interval(1.0).name == "U1"
        assert Interval(2.0).name == "O8"
        assert Interval(3.0).name == "P12"
        assert Interval(4.0).name == "O15"
        assert Interval.P5.times(2).name == "M9"
        assert Interval.M3.up(Interval.O8).name == "M10"
        assert Interval.TT.up(Interval.O8).name == "TT11"

    def test_between_pitches(self) -> None:
        """Order of the pitches does not matter."""
        c4, g4 = Pitch.parse("C4"), Pitch.parse("G4")
        assert Interval.between(c4, g4) == Interval.P5
        assert Interval.between(g4, c4) == Interval.P5

    def test_stacking(self) -> None:
        assert Interval.M3.up(Interval.m3) == Interval.P5
        assert Interval.P5.down(Interval.M3) == Interval.m3
        assert Interval.M3.down(Interval.P5) == Interval.m3

    def test_times(self) -> None:
        assert Interval.M2.times(6) == Interval.OCTAVE
        assert Interval.O8.times(0.5) == Interval.TT
        with pytest.raises(InvalidArgumentError):
            Interval.P5.times(-1)

    def test_octave_reduction_and_complement(self) -> None:
        assert Interval(3.0).octave_reduced() == Interval(1.5)
        assert Interval.M3.complement() == Interval.m6
        assert Interval.P5.complement() == Interval.P4

    def test_cents_and_semitones(self) -> None:
        assert Interval.M3.cents == pytest.approx(400.0)
        assert Interval.M3.semitones == 4
        assert Interval(1.25).semitones == 4

    def test_rationalize(self) -> None:
        assert Interval.M3.rationalize() == Rational(5, 4)
        assert Interval.P5.rationalize() == Rational(3, 2)
        assert Interval.TT.rationalize() == Rational(17, 12)

    def test_between_uses_tuning_limit(self) -> None:
        """Interval names follow the perceptual limit of the pitches' tuning."""
        lenient = TuningConfiguration(name="lenient", perceptual_limit_cents=20.0)
        assert Interval.between(Pitch(440.0), Pitch(550.0)).name == "M3-14c"
        assert (
            Interval.between(Pitch(440.0, tuning=lenient), Pitch(550.0, tuning=lenient)).name
            == "M3"
        )

    def test_equality_to_ten_significant_digits(self) -> None:
        """Ratios agreeing to 10 significant digits are the same interval."""
        assert Interval(1.5) == Interval(1.5 + 1e-12)
        assert hash(Interval(1.5)) == hash(Interval(1.5 + 1e-12))
        assert Interval(1.5) != Interval(1.5 + 1e-8)
        assert Interval.M3.up(Interval.m3) == Interval.P5

    def test_equality_ignores_name(self) -> None:
        assert Interval(1.5, "fifth") == Interval(1.5)
        assert len({Interval(1.5, "fifth"), Interval(1.5)}) == 1

    def test_ordering(self) -> None:
        assert sorted([Interval.P5, Interval.U1, Interval.M3]) == [
            Interval.U1,
            Interval.M3,
            Interval.P5,
        ]
