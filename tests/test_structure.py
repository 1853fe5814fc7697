"""
Tests for Structure.

Tests cover:
- Pattern parsing and spelling
- Complexity (LCM / GCD of the rationalized intervals)
- Inversions
- Enumeration of every distinct structure of a size
"""

import math

import pytest

from chuk_mcp_harmony.core import (
    Interval,
    InvalidArgumentError,
    ParseError,
    Rational,
    Structure,
    UnsupportedInversionError,
)


@pytest.fixture
def major_triad() -> Structure:
    return Structure.parse("1 3 5")


class TestParse:
    """Tests for building structures from scale-degree patterns."""

    def test_major_triad(self, major_triad: Structure) -> None:
        assert major_triad.intervals == (Interval.U1, Interval.M3, Interval.P5)
        assert major_triad.size == 3

    def test_accidentals(self) -> None:
        minor_seventh = Structure.parse("1 3b 5 7b")
        assert minor_seventh.intervals == (Interval.U1, Interval.m3, Interval.P5, Interval.m7)

    def test_compound_degrees(self) -> None:
        """Degrees above 7 continue into the next octave."""
        dominant_ninth = Structure.parse("1 3 5 7b 9")
        assert dominant_ninth.intervals[-1] == Interval.M2.up(Interval.O8)

    def test_measured_from_lowest(self) -> None:
        """Patterns without a root are re-rooted on their lowest degree."""
        assert Structure.parse("3 5 8") == Structure.parse("1 3b 6b")

    def test_duplicates_dropped(self) -> None:
        assert Structure.parse("1 3 3 5").size == 3

    def test_invalid(self) -> None:
        with pytest.raises(ParseError):
            Structure.parse("root third fifth")
        with pytest.raises(ParseError):
            Structure.parse("0 3 5")

    def test_pattern_round_trip(self, major_triad: Structure) -> None:
        assert major_triad.pattern == "1 3 5"
        assert Structure.parse("1 3b 5 7b").pattern == "1 3b 5 7b"
        assert Structure.parse("1 4# 8").pattern == "1 4# 8"


class TestStructureValue:
    """Tests for structure construction and immutability."""

    def test_intervals_sorted(self) -> None:
        structure = Structure((Interval.P5, Interval.U1, Interval.M3))
        assert structure.intervals == (Interval.U1, Interval.M3, Interval.P5)

    def test_add_interval_returns_new(self, major_triad: Structure) -> None:
        seventh = major_triad.add_interval(Interval.M7)
        assert seventh.size == 4
        assert major_triad.size == 3
        assert seventh.intervals[-1] == Interval.M7

    def test_add_interval_keeps_order(self) -> None:
        structure = Structure((Interval.U1, Interval.P5)).add_interval(Interval.M3)
        assert structure == Structure.parse("1 3 5")

    def test_hashable(self, major_triad: Structure) -> None:
        assert len({major_triad, Structure.parse("1 3 5")}) == 1

    def test_str(self, major_triad: Structure) -> None:
        assert str(major_triad) == "[U1, M3, P5]"


class TestComplexity:
    """Tests for the LCM / GCD dissonance measure."""

    def test_rationals(self, major_triad: Structure) -> None:
        assert major_triad.rationals() == [Rational(1), Rational(5, 4), Rational(3, 2)]

    def test_undertone_and_overtone(self, major_triad: Structure) -> None:
        """The major triad is 4:5:6 - GCD 1/4, LCM 15."""
        assert major_triad.common_undertone() == Rational(1, 4)
        assert major_triad.common_overtone() == Rational(15)

    def test_major_triad(self, major_triad: Structure) -> None:
        assert major_triad.complexity() == 60.0
        assert major_triad.normalized_complexity() == pytest.approx(math.log(60) / 3)

    def test_minor_triad(self) -> None:
        assert Structure.parse("1 3b 5").complexity() == 60.0

    @pytest.mark.parametrize(
        "interval,expected",
        [
            (Interval.P5, 6.0),
            (Interval.P4, 12.0),
            (Interval.M3, 20.0),
            (Interval.M2, 72.0),
            (Interval.TT, 204.0),
        ],
    )
    def test_dyads(self, interval: Interval, expected: float) -> None:
        """A dyad p/q scores p * q."""
        assert Structure((Interval.U1, interval)).complexity() == expected

    def test_single_interval(self) -> None:
        assert Structure((Interval.U1,)).complexity() == 1.0
        assert Structure((Interval.U1,)).normalized_complexity() == 0.0

    def test_empty_structure(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Structure().complexity()

    def test_interval_vector(self, major_triad: Structure) -> None:
        assert major_triad.interval_vector() == (0, 0, 1, 1, 1, 0)
        assert Structure.parse("1 3 5#").interval_vector() == (0, 0, 0, 3, 0, 0)


class TestInversion:
    """Tests for structure inversions."""

    def test_root_position(self, major_triad: Structure) -> None:
        assert major_triad.inversion(0) == major_triad

    def test_first_inversion(self, major_triad: Structure) -> None:
        assert major_triad.inversion(1) == Structure.parse("1 3b 6b")

    def test_second_inversion(self, major_triad: Structure) -> None:
        assert major_triad.inversion(2) == Structure.parse("1 4 6")

    def test_inversions_compose(self, major_triad: Structure) -> None:
        """Inverting the first inversion on its last note returns to root position."""
        assert major_triad.inversion(1).inversion(2) == major_triad

    def test_inversion_root(self, major_triad: Structure) -> None:
        """Within an octave the new root is the nth interval."""
        assert major_triad.inversion_root(0) == Interval.U1
        assert major_triad.inversion_root(1) == Interval.M3
        assert major_triad.inversion_root(2) == Interval.P5

    def test_compound_structure(self) -> None:
        """Beyond the octave the new root is the lowest raised interval."""
        ninth = Structure.parse("1 5 9")
        assert ninth.inversion_root(1) == Interval.P5
        assert ninth.inversion(1) == Structure.parse("1 4 5")
        assert ninth.inversion_root(2) == Interval.O8
        assert ninth.inversion(2) == Structure.parse("1 2 5")

    def test_octave_doubling_merges(self) -> None:
        """A raised root landing on the octave is not counted twice."""
        inverted = Structure.parse("1 3 5 8").inversion(1)
        assert inverted == Structure.parse("1 3b 6b")
        assert inverted.size == 3

    def test_inversion_changes_complexity(self, major_triad: Structure) -> None:
        """5:6:8 is more complex than 4:5:6."""
        assert major_triad.inversion(1).complexity() == 120.0

    @pytest.mark.parametrize("number", [-1, 3, 10])
    def test_out_of_range(self, major_triad: Structure, number: int) -> None:
        with pytest.raises(UnsupportedInversionError) as exc_info:
            major_triad.inversion(number)
        assert exc_info.value.index == number
        assert exc_info.value.size == 3


class TestAllCombinations:
    """Tests for ranking every structure of a size."""

    def test_dyads(self) -> None:
        """One dyad per interval class, inversions collapsed."""
        dyads = Structure.all_combinations(2)
        assert [s.intervals[1] for s in dyads] == [
            Interval.P5,
            Interval.M6,
            Interval.M3,
            Interval.M2,
            Interval.M7,
            Interval.TT,
        ]
        assert [s.complexity() for s in dyads] == [6.0, 15.0, 20.0, 72.0, 120.0, 204.0]

    def test_sorted_by_complexity(self) -> None:
        triads = Structure.all_combinations(3)
        complexities = [s.complexity() for s in triads]
        assert complexities == sorted(complexities)

    def test_no_two_are_inversions(self) -> None:
        """No kept structure is a different inversion of another kept one."""
        triads = Structure.all_combinations(3)
        kept = set(triads)
        for structure in triads:
            for number in range(1, structure.size):
                inverted = structure.inversion(number)
                assert inverted == structure or inverted not in kept

    def test_all_start_at_unison(self) -> None:
        for structure in Structure.all_combinations(3):
            assert structure.intervals[0] == Interval.U1
            assert structure.size == 3

    def test_symmetric_structures_kept(self) -> None:
        """Structures that invert onto themselves are not dropped."""
        triads = Structure.all_combinations(3)
        assert Structure.parse("1 3 5#") in triads

    def test_size_one(self) -> None:
        assert Structure.all_combinations(1) == [Structure((Interval.U1,))]

    def test_full_chromatic(self) -> None:
        assert len(Structure.all_combinations(12)) == 1

    def test_memoized(self) -> None:
        """Repeated calls return equal, independent lists."""
        first = Structure.all_combinations(3)
        second = Structure.all_combinations(3)
        assert first == second
        assert first is not second

    def test_invalid_size(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Structure.all_combinations(0)

    def test_larger_than_chromatic(self) -> None:
        """No structure has more than 12 interval classes."""
        assert Structure.all_combinations(13) == []
