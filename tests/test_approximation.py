"""
Tests for rational approximation of real ratios.

Tests cover:
- Stern-Brocot walk and term budgets
- Cents-bounded approximation of the chromatic intervals
- Continued fraction expansion
"""

import math

import pytest

from chuk_mcp_harmony.core import (
    CHROMATIC_INTERVALS,
    InvalidArgumentError,
    Rational,
    approximate,
    approximate_cfe,
    approximate_within_cents,
    cents_between,
    continued_fraction,
    stern_brocot_walk,
)

SQRT2 = math.sqrt(2)


class TestSternBrocot:
    """Tests for the Stern-Brocot approximator."""

    def test_first_term_is_nearest_integer(self) -> None:
        """One term gives floor(x) or floor(x) + 1, whichever is closer."""
        assert approximate(SQRT2, 1) == Rational(1)
        assert approximate(1.6, 1) == Rational(2)
        assert approximate(2 ** (4 / 12), 1) == Rational(1)

    def test_tie_goes_to_floor(self) -> None:
        assert approximate(1.5, 1) == Rational(1)

    def test_sqrt2_convergence(self) -> None:
        """Successive budgets approach sqrt(2)."""
        assert approximate(SQRT2, 2) == Rational(3, 2)
        assert approximate(SQRT2, 4) == Rational(7, 5)
        assert approximate(SQRT2, 6) == Rational(17, 12)

    def test_exact_value_stops_walk(self) -> None:
        """The walk ends once the error is zero."""
        terms = list(stern_brocot_walk(1.5))
        assert terms[-1] == Rational(3, 2)
        assert len(terms) == 2

    def test_integer_input(self) -> None:
        assert approximate(3.0, 10) == Rational(3)

    def test_errors_never_increase(self) -> None:
        """Each term is at least as close as the previous one."""
        errors = [abs(float(r) - math.pi) for r in approximate_walk(math.pi, 50)]
        assert all(later <= earlier for earlier, later in zip(errors, errors[1:]))

    def test_non_positive_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            approximate(0.0, 5)
        with pytest.raises(InvalidArgumentError):
            approximate(-1.5, 5)

    def test_below_resolution_rejected(self) -> None:
        """Values that round to zero at 10 decimals cannot be approximated."""
        with pytest.raises(InvalidArgumentError, match="resolution"):
            approximate(1e-12, 5)
        assert approximate(2e-10, 1) == Rational(0)

    def test_zero_budget_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            approximate(SQRT2, 0)


def approximate_walk(x: float, terms: int) -> list[Rational]:
    """First few terms of the Stern-Brocot walk."""
    walk = stern_brocot_walk(x)
    return [next(walk) for _ in range(terms)]


class TestWithinCents:
    """Tests for cents-bounded approximation."""

    @pytest.mark.parametrize(
        "semitones,expected",
        [
            (0, Rational(1)),
            (1, Rational(16, 15)),
            (2, Rational(9, 8)),
            (3, Rational(6, 5)),
            (4, Rational(5, 4)),
            (5, Rational(4, 3)),
            (6, Rational(17, 12)),
            (7, Rational(3, 2)),
            (8, Rational(8, 5)),
            (9, Rational(5, 3)),
            (10, Rational(16, 9)),
            (11, Rational(15, 8)),
        ],
    )
    def test_chromatic_intervals(self, semitones: int, expected: Rational) -> None:
        """Equal-tempered intervals map to familiar just fractions at 16 cents."""
        ratio = CHROMATIC_INTERVALS[semitones].ratio
        assert approximate_within_cents(ratio, 16.0) == expected

    def test_result_within_tolerance(self) -> None:
        result = approximate_within_cents(2 ** (4 / 12), 16.0)
        assert cents_between(2 ** (4 / 12), float(result)) <= 16.0

    def test_tighter_tolerance_gives_larger_fraction(self) -> None:
        """A smaller tolerance can only refine the approximation."""
        loose = approximate_within_cents(2 ** (4 / 12), 16.0)
        tight = approximate_within_cents(2 ** (4 / 12), 1.0)
        assert tight != loose
        assert tight.denominator > loose.denominator
        assert cents_between(2 ** (4 / 12), float(tight)) <= 1.0

    def test_sign_of_tolerance_ignored(self) -> None:
        assert approximate_within_cents(1.5, -16.0) == Rational(3, 2)

    def test_cents_between(self) -> None:
        assert cents_between(2.0, 1.0) == pytest.approx(1200.0)
        assert cents_between(1.0, 2.0) == pytest.approx(1200.0)
        assert cents_between(1.0, 0.0) == math.inf


class TestContinuedFraction:
    """Tests for continued fraction expansion."""

    def test_coefficients(self) -> None:
        assert continued_fraction(1.5, 5) == [1, 2]
        assert continued_fraction(SQRT2, 4) == [1, 2, 2, 2]

    def test_integer(self) -> None:
        assert continued_fraction(3.0, 5) == [3]

    def test_convergent(self) -> None:
        assert approximate_cfe(SQRT2, 3) == Rational(7, 5)
        assert approximate_cfe(1.25, 5) == Rational(5, 4)

    def test_invalid_arguments(self) -> None:
        with pytest.raises(InvalidArgumentError):
            continued_fraction(1.5, 0)
        with pytest.raises(InvalidArgumentError):
            continued_fraction(-1.5, 3)
