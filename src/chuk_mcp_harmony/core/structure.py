"""
Structure primitive - an ordered set of intervals above a notional root.

A structure is the abstract shape of a chord (or scale, or extension):
intervals measured from a unison root, kept sorted by ratio. It knows how
consonant it is (complexity), how to re-root itself (inversion), and how
to enumerate every distinct shape of a given size.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache, reduce

from chuk_mcp_harmony.constants import DEFAULT_TOLERANCE_CENTS, SEMITONES_PER_OCTAVE

from .errors import InvalidArgumentError, ParseError, UnsupportedInversionError
from .interval import CHROMATIC_INTERVALS, Interval
from .rational import Rational, gcd, lcm

logger = logging.getLogger(__name__)

_DEGREE_PATTERN = re.compile(r"(\d+)([#bxX]*)")
_ACCIDENTALS: dict[str, int] = {"#": 1, "b": -1, "x": 2, "X": 2}

# Semitones above the root for scale degrees 1-7 (major scale)
_DEGREE_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Degree and accidental spelling for each chromatic step
_STEP_SPELLINGS: tuple[tuple[int, str], ...] = (
    (1, ""),
    (2, "b"),
    (2, ""),
    (3, "b"),
    (3, ""),
    (4, ""),
    (4, "#"),
    (5, ""),
    (6, "b"),
    (6, ""),
    (7, "b"),
    (7, ""),
)


def _semitones_from_pattern(pattern: str) -> list[int]:
    matches = _DEGREE_PATTERN.findall(pattern)
    if not matches:
        raise ParseError(f"Pattern contains no scale degrees: {pattern!r}")

    semitones = set()
    for number, accidentals in matches:
        degree = int(number)
        if degree < 1:
            raise ParseError(f"Scale degrees start at 1, got {degree} in {pattern!r}")
        octave, index = divmod(degree - 1, len(_DEGREE_SEMITONES))
        alteration = sum(_ACCIDENTALS[symbol] for symbol in accidentals)
        semitones.add(_DEGREE_SEMITONES[index] + SEMITONES_PER_OCTAVE * octave + alteration)
    return sorted(semitones)


@dataclass(frozen=True)
class Structure:
    """
    Intervals above an implicit unison root, sorted ascending by ratio.

    The first interval is conventionally the unison. Structures are values:
    every operation returns a new Structure.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(sorted(self.intervals)))

    @classmethod
    def from_intervals(cls, intervals: Iterable[Interval]) -> Structure:
        return cls(tuple(intervals))

    @classmethod
    def parse(cls, pattern: str) -> Structure:
        """
        Parse a structure from a scale-degree pattern.

        Degrees are major-scale numbers (8 and up continue into the next
        octave) with optional accidentals: '1 3 5' is a major triad,
        '1 3b 5 7b' a minor seventh, '1 3 5 7 9b' a dominant flat nine.
        Duplicates are dropped; intervals are measured from the lowest note.

        Raises:
            ParseError: If the pattern holds no degrees
        """
        semitones = _semitones_from_pattern(pattern)
        lowest = semitones[0]
        return cls(tuple(Interval.from_semitones(s - lowest) for s in semitones))

    @property
    def size(self) -> int:
        return len(self.intervals)

    @property
    def pattern(self) -> str:
        """Scale-degree pattern for the intervals, e.g. '1 3 5'."""
        tokens = []
        for interval in self.intervals:
            octave, step = divmod(interval.semitones, SEMITONES_PER_OCTAVE)
            degree, accidental = _STEP_SPELLINGS[step]
            tokens.append(f"{degree + len(_DEGREE_SEMITONES) * octave}{accidental}")
        return " ".join(tokens)

    def add_interval(self, interval: Interval) -> Structure:
        """Return a new structure with the interval inserted in order."""
        return Structure(self.intervals + (interval,))

    def rationals(self, tolerance_cents: float = DEFAULT_TOLERANCE_CENTS) -> list[Rational]:
        """Just-intonation approximations of every interval."""
        return [interval.rationalize(tolerance_cents) for interval in self.intervals]

    def common_undertone(self, tolerance_cents: float = DEFAULT_TOLERANCE_CENTS) -> Rational:
        """gcd of the rationalized intervals, folded left to right."""
        return reduce(gcd, self.rationals(tolerance_cents))

    def common_overtone(self, tolerance_cents: float = DEFAULT_TOLERANCE_CENTS) -> Rational:
        """lcm of the rationalized intervals, folded left to right."""
        return reduce(lcm, self.rationals(tolerance_cents))

    def complexity(self, tolerance_cents: float = DEFAULT_TOLERANCE_CENTS) -> float:
        """
        Dissonance measure: LCM / GCD of the rationalized intervals.

        This is how far apart the highest common fundamental and the lowest
        common overtone of the structure sit in the harmonic series. A major
        triad (4:5:6) scores 60, a perfect fifth 6. A single interval scores 1.
        """
        if not self.intervals:
            raise InvalidArgumentError("Complexity of an empty structure is undefined")
        if self.size == 1:
            return 1.0

        undertone = self.common_undertone(tolerance_cents)
        overtone = self.common_overtone(tolerance_cents)
        return float(overtone / undertone)

    def normalized_complexity(self, tolerance_cents: float = DEFAULT_TOLERANCE_CENTS) -> float:
        """Natural log of the complexity divided by the size."""
        return math.log(self.complexity(tolerance_cents)) / self.size

    def inversion(self, number: int) -> Structure:
        """
        Invert the structure by raising its lowest intervals an octave.

        The lowest ``number`` intervals go up an octave, the result is
        re-sorted and every interval is measured from the new lowest one.
        Intervals that land on the same ratio (an octave doubling) merge.

        Raises:
            UnsupportedInversionError: If number is outside [0, size)
        """
        raised = self._raised(number)
        root = min(raised)
        # dict as an insertion-ordered set
        return Structure(tuple(dict.fromkeys(interval.down(root) for interval in raised)))

    def inversion_root(self, number: int) -> Interval:
        """
        Interval from the old root to the root of ``inversion(number)``.

        This is the lowest interval once the first ``number`` intervals are
        raised an octave, so not always the nth interval when the structure
        spans more than an octave.

        Raises:
            UnsupportedInversionError: If number is outside [0, size)
        """
        return min(self._raised(number))

    def _raised(self, number: int) -> list[Interval]:
        if number < 0 or number >= self.size:
            raise UnsupportedInversionError(number, self.size)
        return [
            interval.up(Interval.OCTAVE) if index < number else interval
            for index, interval in enumerate(self.intervals)
        ]

    def interval_vector(self) -> tuple[int, ...]:
        """
        Count of each interval class (m2/M7 up to TT) between all note pairs.

        The major triad gives (0, 0, 1, 1, 1, 0).
        """
        counts = [0] * (SEMITONES_PER_OCTAVE // 2)
        for i, lower in enumerate(self.intervals):
            for upper in self.intervals[i + 1 :]:
                step = upper.down(lower).semitones % SEMITONES_PER_OCTAVE
                interval_class = min(step, SEMITONES_PER_OCTAVE - step)
                if interval_class:
                    counts[interval_class - 1] += 1
        return tuple(counts)

    @staticmethod
    def all_combinations(
        size: int, tolerance_cents: float = DEFAULT_TOLERANCE_CENTS
    ) -> list[Structure]:
        """
        Every distinct structure of a given size, most consonant first.

        Candidates are built from the 12 chromatic interval classes, starting
        at unison, ranked by complexity. Of each set of structures that are
        inversions of one another only the most consonant one is kept.

        Args:
            size: Number of intervals (including the unison)
            tolerance_cents: Tolerance used to rationalize intervals

        Returns:
            List of structures sorted by ascending complexity
        """
        if size <= 0:
            raise InvalidArgumentError(f"Size must be positive, got {size}")
        return list(_ranked_combinations(size, tolerance_cents))

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __str__(self) -> str:
        return "[" + ", ".join(str(interval) for interval in self.intervals) + "]"


def _extend(seed: Structure, last_index: int, size: int) -> Iterator[Structure]:
    """Depth-first: append every interval class above the seed's highest one."""
    if seed.size == size:
        yield seed
        return
    for index in range(last_index + 1, len(CHROMATIC_INTERVALS)):
        yield from _extend(seed.add_interval(CHROMATIC_INTERVALS[index]), index, size)


@lru_cache(maxsize=None)
def _ranked_combinations(size: int, tolerance_cents: float) -> tuple[Structure, ...]:
    candidates = _extend(Structure((Interval.UNISON,)), 0, size)
    ranked = sorted(candidates, key=lambda s: s.complexity(tolerance_cents))
    generated = len(ranked)

    # Back to front, so the most consonant member of each inversion class survives
    present = set(ranked)
    for i in range(len(ranked) - 1, -1, -1):
        structure = ranked[i]
        for number in range(1, structure.size):
            inverted = structure.inversion(number)
            if inverted != structure and inverted in present:
                present.discard(structure)
                del ranked[i]
                break

    logger.debug(
        "Generated %d structures of size %d, %d distinct by inversion",
        generated,
        size,
        len(ranked),
    )
    return tuple(ranked)
