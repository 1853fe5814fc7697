"""
Interval primitive - the ratio between two frequencies.

Intervals are continuous (any real ratio >= 1). ``rationalize`` bridges
them to the discrete world of just-intonation fractions, which is what
complexity, undertone and overtone analysis operate on.
"""

from __future__ import annotations

import math
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

from chuk_mcp_harmony.constants import (
    CENTS_PER_OCTAVE,
    CENTS_PER_SEMITONE,
    DEFAULT_PERCEPTUAL_LIMIT_CENTS,
    DEFAULT_TOLERANCE_CENTS,
    INTERVAL_CLASS_NAMES,
    SEMITONES_PER_OCTAVE,
)

from .approximation import approximate_within_cents, round_significant
from .errors import InvalidArgumentError
from .notation import format_cents
from .rational import Rational

if TYPE_CHECKING:
    from .pitch import Pitch

# Degree numbers per octave (M3 -> M10)
_DEGREE_NUMBERS = 7


def name_from_ratio(
    ratio: float, perceptual_limit_cents: float = DEFAULT_PERCEPTUAL_LIMIT_CENTS
) -> str:
    """
    Name the nearest equal-tempered interval for a ratio.

    Beyond the octave the degree number grows by 7 per octave (M3 -> M10,
    P5 -> P12, octaves O8, O15). A signed cents suffix is added when the
    ratio deviates more than ``perceptual_limit_cents`` from that interval.

    Args:
        ratio: Frequency ratio (> 0, inverted when below 1)
        perceptual_limit_cents: Threshold for the cents suffix

    Returns:
        Name like 'P5', 'M10', 'TT' or 'M3-14c'
    """
    if ratio <= 0:
        raise InvalidArgumentError(f"Ratio must be positive, got {ratio}")
    if ratio < 1:
        ratio = 1 / ratio

    exact = SEMITONES_PER_OCTAVE * math.log2(ratio)
    semitones = round(exact)
    octaves, mod = divmod(semitones, SEMITONES_PER_OCTAVE)

    if semitones == 0:
        name = "U1"
    elif mod == 0:
        name = f"O{1 + _DEGREE_NUMBERS * octaves}"
    elif mod == 6:
        name = "TT" if octaves == 0 else f"TT{4 + _DEGREE_NUMBERS * octaves}"
    else:
        quality, degree = INTERVAL_CLASS_NAMES[mod][0], int(INTERVAL_CLASS_NAMES[mod][1])
        name = f"{quality}{degree + _DEGREE_NUMBERS * octaves}"

    deviation = (exact - semitones) * CENTS_PER_SEMITONE
    rounded = round(deviation)
    if abs(deviation) > perceptual_limit_cents and rounded != 0:
        name += format_cents(rounded)
    return name


@total_ordering
class Interval:
    """
    Ratio between two frequencies, normalized to be >= 1.

    Direction is dropped: a ratio below 1 is inverted on construction.
    The name is derived from the ratio unless given, and is not part of
    equality. Ratios compare to 10 significant digits.

    Immutable and hashable.
    """

    __slots__ = ("_ratio", "_name")
    _ratio: float
    _name: str

    # Equal-tempered chromatic intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    U1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    O8: ClassVar[Interval]

    def __init__(self, ratio: float, name: str | None = None) -> None:
        """Create an interval from a frequency ratio."""
        if ratio <= 0:
            raise InvalidArgumentError(f"Ratio must be positive, got {ratio}")
        if ratio < 1:
            ratio = 1 / ratio
        object.__setattr__(self, "_ratio", float(ratio))
        object.__setattr__(self, "_name", name or name_from_ratio(ratio))

    @classmethod
    def between(cls, first: Pitch, second: Pitch) -> Interval:
        """
        The interval between two pitches, regardless of order.

        Named with the perceptual limit of the first pitch's tuning.
        """
        ratio = first.frequency / second.frequency
        return cls(ratio, name_from_ratio(ratio, first.tuning.perceptual_limit_cents))

    @classmethod
    def from_semitones(cls, semitones: float) -> Interval:
        """Equal-tempered interval spanning a number of semitones."""
        return cls(2 ** (semitones / SEMITONES_PER_OCTAVE))

    @property
    def ratio(self) -> float:
        return self._ratio

    @property
    def name(self) -> str:
        return self._name

    @property
    def cents(self) -> float:
        """Size of the interval in cents."""
        return CENTS_PER_OCTAVE * math.log2(self._ratio)

    @property
    def semitones(self) -> int:
        """Nearest number of equal-tempered semitones."""
        return round(SEMITONES_PER_OCTAVE * math.log2(self._ratio))

    def up(self, other: Interval) -> Interval:
        """Stack another interval on top of this one."""
        return Interval(self._ratio * other._ratio)

    def down(self, other: Interval) -> Interval:
        """Distance left after going down another interval (renormalized >= 1)."""
        return Interval(self._ratio / other._ratio)

    def times(self, n: float) -> Interval:
        """
        Repeat this interval n times (n may be fractional).

        Raises:
            InvalidArgumentError: If n is negative
        """
        if n < 0:
            raise InvalidArgumentError(f"Repetitions cannot be negative, got {n}")
        return Interval(self._ratio**n)

    def octave_reduced(self) -> Interval:
        """The same interval class folded into [unison, octave)."""
        return Interval(2 ** (math.log2(self._ratio) % 1))

    def complement(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 -> m6, P5 -> P4
        """
        return Interval(2 / self.octave_reduced()._ratio)

    def rationalize(self, tolerance_cents: float = DEFAULT_TOLERANCE_CENTS) -> Rational:
        """
        Smallest just-intonation fraction within a cents tolerance of the ratio.

        Uses the Stern-Brocot search, so the major third 2^(4/12) becomes 5/4
        and the perfect fifth 2^(7/12) becomes 3/2 at the default 16 cents.
        """
        return approximate_within_cents(self._ratio, tolerance_cents)

    @property
    def _key(self) -> float:
        return round_significant(self._ratio)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"Interval({self._ratio!r}, {self._name!r})"

    def __str__(self) -> str:
        return self._name


# Initialize class constants after class is defined
Interval.UNISON = Interval(1.0, "U1")
Interval.MINOR_SECOND = Interval.from_semitones(1)
Interval.MAJOR_SECOND = Interval.from_semitones(2)
Interval.MINOR_THIRD = Interval.from_semitones(3)
Interval.MAJOR_THIRD = Interval.from_semitones(4)
Interval.PERFECT_FOURTH = Interval.from_semitones(5)
Interval.TRITONE = Interval.from_semitones(6)
Interval.PERFECT_FIFTH = Interval.from_semitones(7)
Interval.MINOR_SIXTH = Interval.from_semitones(8)
Interval.MAJOR_SIXTH = Interval.from_semitones(9)
Interval.MINOR_SEVENTH = Interval.from_semitones(10)
Interval.MAJOR_SEVENTH = Interval.from_semitones(11)
Interval.OCTAVE = Interval(2.0, "O8")

# Short aliases
Interval.U1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.O8 = Interval.OCTAVE

# The 12 chromatic interval classes, unison through major seventh
CHROMATIC_INTERVALS: tuple[Interval, ...] = (
    Interval.U1,
    Interval.m2,
    Interval.M2,
    Interval.m3,
    Interval.M3,
    Interval.P4,
    Interval.TT,
    Interval.P5,
    Interval.m6,
    Interval.M6,
    Interval.m7,
    Interval.M7,
)
