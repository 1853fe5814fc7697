"""
Rational approximation of real ratios.

Two approximators are provided:
- Stern-Brocot search: mediant bisection between floor(x) and floor(x) + 1,
  keeping the closest rational seen so far. This is what intervals use.
- Continued fraction expansion: kept for comparison and testing.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from fractions import Fraction
from functools import lru_cache
from itertools import islice

from chuk_mcp_harmony.constants import (
    APPROXIMATION_DECIMALS,
    CENTS_PER_OCTAVE,
    CFE_EPSILON,
    DEFAULT_TOLERANCE_CENTS,
    EQUALITY_SIGNIFICANT_DIGITS,
    MAX_APPROXIMATION_TERMS,
)

from .errors import InvalidArgumentError
from .rational import Rational

logger = logging.getLogger(__name__)


def round_significant(value: float, digits: int = EQUALITY_SIGNIFICANT_DIGITS) -> float:
    """Round to a number of significant digits, used as an equality key for floats."""
    return float(f"{value:.{digits}g}")


def cents_between(x: float, y: float) -> float:
    """Absolute distance between two positive ratios, in cents."""
    if y == 0:
        return math.inf
    return abs(CENTS_PER_OCTAVE * math.log2(x / y))


def stern_brocot_walk(x: float) -> Iterator[Rational]:
    """
    Walk the Stern-Brocot tree towards x, yielding the best rational per term.

    The first term is whichever of floor(x) and floor(x) + 1 is closer
    (floor on a tie). Every following term computes one mediant of the
    current bounds, moves the bound on the side of x, and yields the best
    approximation found so far. The walk ends once the error reaches 0.

    Args:
        x: Positive real to approximate

    Yields:
        Best rational after each term (errors are non-increasing)
    """
    if x <= 0:
        raise InvalidArgumentError(f"Can only approximate positive values, got {x}")

    # Drop float noise below the 10th decimal
    x = round(x, APPROXIMATION_DECIMALS)
    if x == 0:
        raise InvalidArgumentError(
            f"Value is below the approximation resolution of 1e-{APPROXIMATION_DECIMALS}"
        )

    floor = math.floor(x)
    left = Rational(floor)
    right = Rational(floor + 1)
    best = left if x - floor <= floor + 1 - x else right
    best_error = abs(float(best) - x)
    yield best

    while best_error != 0:
        mediant = Rational.mediant(left, right)
        value = float(mediant)
        if x < value:
            right = mediant
        else:
            left = mediant

        error = abs(value - x)
        if error < best_error:
            best = mediant
            best_error = error
        yield best


def approximate(x: float, max_terms: int) -> Rational:
    """
    Best Stern-Brocot approximation of x within a term budget.

    Args:
        x: Positive real to approximate
        max_terms: Number of terms to evaluate (>= 1)

    Returns:
        The closest rational found before the budget ran out or the error hit 0
    """
    if max_terms < 1:
        raise InvalidArgumentError(f"Term budget must be at least 1, got {max_terms}")

    best = Rational.ZERO
    for best in islice(stern_brocot_walk(x), max_terms):
        pass
    return best


@lru_cache(maxsize=4096)
def approximate_within_cents(
    x: float,
    tolerance_cents: float = DEFAULT_TOLERANCE_CENTS,
    max_terms: int = MAX_APPROXIMATION_TERMS,
) -> Rational:
    """
    Smallest-budget Stern-Brocot approximation within a cents tolerance.

    Equivalent to calling ``approximate(x, n)`` for n = 1, 2, ... until the
    error in cents is within tolerance, but walks the tree only once.

    Args:
        x: Positive ratio
        tolerance_cents: Allowed error in cents (sign ignored)
        max_terms: Safety cap on the number of terms

    Returns:
        The first approximation within tolerance, or the best one found
        when the cap is reached
    """
    tolerance = abs(tolerance_cents)
    best = Rational.ZERO
    for best in islice(stern_brocot_walk(x), max_terms):
        if cents_between(x, float(best)) <= tolerance:
            return best

    logger.debug(
        "Approximation of %s stopped at %s without reaching %s cents", x, best, tolerance
    )
    return best


def continued_fraction(x: float, terms: int) -> list[int]:
    """
    Partial quotients of the continued fraction expansion of x.

    Uses exact Fraction arithmetic on the decimal representation of x and
    stops early once the fractional remainder drops below 1e-8.

    Args:
        x: Non-negative real
        terms: Maximum number of partial quotients (>= 1)

    Returns:
        List of integer coefficients [a0, a1, a2, ...]
    """
    if terms <= 0:
        raise InvalidArgumentError(f"Invalid number of terms: {terms}")
    if x < 0:
        raise InvalidArgumentError(f"Can only expand non-negative values, got {x}")

    value = Fraction(repr(x))
    coefficients: list[int] = []
    while len(coefficients) < terms:
        whole = math.floor(value)
        fractional = value - whole
        coefficients.append(whole)
        if fractional <= CFE_EPSILON:
            break
        value = 1 / fractional

    return coefficients


def approximate_cfe(x: float, terms: int) -> Rational:
    """
    Approximate x by folding its continued fraction convergent back up.

    Args:
        x: Non-negative real
        terms: Maximum number of partial quotients to use

    Returns:
        The convergent as a Rational
    """
    coefficients = continued_fraction(x, terms)

    result = Rational(coefficients[-1])
    for coefficient in reversed(coefficients[:-1]):
        result = result.invert() + coefficient
    return result
