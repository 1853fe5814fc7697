"""
Rational primitive - exact fractions in lowest terms.

Rationals are the discrete side of the pitch model: interval ratios are
approximated by small fractions, and the gcd/lcm of those fractions measure
how far a set of intervals sits inside a common overtone series.
"""

from __future__ import annotations

import math
from fractions import Fraction
from functools import total_ordering
from typing import ClassVar

from .errors import DivisionByZeroError, InvalidArgumentError, ParseError


@total_ordering
class Rational:
    """
    An exact fraction, always stored in lowest terms.

    The denominator is always positive and zero is stored as 0/1.
    Equality and ordering use cross-multiplication, never floats.

    Immutable and hashable.
    """

    __slots__ = ("_numerator", "_denominator")
    _numerator: int
    _denominator: int

    ZERO: ClassVar[Rational]
    ONE: ClassVar[Rational]

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """Create a rational, reducing it to lowest terms."""
        if denominator == 0:
            raise InvalidArgumentError("Denominator cannot be 0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        divisor = math.gcd(numerator, denominator) if numerator else denominator
        object.__setattr__(self, "_numerator", numerator // divisor)
        object.__setattr__(self, "_denominator", denominator // divisor)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Rational is immutable")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def from_fraction(cls, value: Fraction) -> Rational:
        """Create a rational from a ``fractions.Fraction``."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Parse a rational from a string like '3/2' or '5'."""
        parts = text.strip().split("/")
        try:
            if len(parts) == 1:
                return cls(int(parts[0]))
            if len(parts) == 2:
                return cls(int(parts[0]), int(parts[1]))
        except ValueError as e:
            raise ParseError(f"Invalid rational: {text!r}") from e
        raise ParseError(f"Invalid rational: {text!r}")

    def to_fraction(self) -> Fraction:
        return Fraction(self._numerator, self._denominator)

    def signum(self) -> int:
        """Return -1, 0 or +1."""
        return (self._numerator > 0) - (self._numerator < 0)

    def invert(self) -> Rational:
        """Return 1 / self."""
        if self._numerator == 0:
            raise DivisionByZeroError("Cannot invert the zero rational")
        return Rational(self._denominator, self._numerator)

    def mean(self, other: Rational) -> Rational:
        """Return the rational half way between self and other."""
        return (self + other) / 2

    @staticmethod
    def mediant(left: Rational, right: Rational) -> Rational:
        """
        Return (a + c) / (b + d) for a/b and c/d.

        The mediant always lies strictly between two distinct positive
        rationals; it is the step of the Stern-Brocot search.
        """
        return Rational(
            left._numerator + right._numerator,
            left._denominator + right._denominator,
        )

    # Arithmetic

    def __add__(self, other: Rational | int) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __radd__(self, other: int) -> Rational:
        return self.__add__(other)

    def __sub__(self, other: Rational | int) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: int) -> Rational:
        return (-self).__add__(other)

    def __mul__(self, other: Rational | int) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __rmul__(self, other: int) -> Rational:
        return self.__mul__(other)

    def __truediv__(self, other: Rational | int) -> Rational:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if other._numerator == 0:
            raise DivisionByZeroError(f"Cannot divide {self} by zero")
        return self * other.invert()

    def __rtruediv__(self, other: int) -> Rational:
        return Rational(other) / self

    def __pow__(self, n: int) -> Rational:
        """Integer power; negative exponents invert the magnitude-th power."""
        if not isinstance(n, int):
            return NotImplemented
        if n == 0:
            return Rational.ONE
        power = Rational(self._numerator ** abs(n), self._denominator ** abs(n))
        return power if n > 0 else power.invert()

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    def __abs__(self) -> Rational:
        if self._numerator >= 0:
            return self
        return Rational(-self._numerator, self._denominator)

    # Comparison

    def __eq__(self, other: object) -> bool:
        other_rational = _coerce(other)
        if other_rational is None:
            return NotImplemented
        return (
            self._numerator * other_rational._denominator
            == other_rational._numerator * self._denominator
        )

    def __lt__(self, other: Rational | int) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._numerator * other._denominator < other._numerator * self._denominator

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    # Conversion

    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"


def _coerce(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return None


Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)


def gcd(a: Rational, b: Rational) -> Rational:
    """
    Greatest common divisor of two rationals.

    Cross-multiplies onto the common denominator b.den * a.den and takes
    the integer gcd of the numerators there, so that gcd(1, 5/4) == 1/4:
    the largest rational both values are integer multiples of.
    """
    return Rational(
        math.gcd(a.numerator * b.denominator, b.numerator * a.denominator),
        a.denominator * b.denominator,
    )


def lcm(a: Rational, b: Rational) -> Rational:
    """Least common multiple of two rationals: a * (b / gcd(a, b))."""
    return a * (b / gcd(a, b))
