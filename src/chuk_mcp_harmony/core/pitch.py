"""
Pitch primitive - a named frequency.

Pitch is the concrete anchor for chords and the result type of the
undertone/overtone analysis. Names are a display concern: two pitches
are equal when their frequencies are, whatever they are called.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import total_ordering
from typing import TYPE_CHECKING

from chuk_mcp_harmony.constants import (
    CENTS_PER_OCTAVE,
    CENTS_PER_SEMITONE,
    PIANO_LOWEST_MIDI,
    SEMITONES_PER_OCTAVE,
)

from .approximation import round_significant
from .errors import InvalidArgumentError
from .notation import format_cents, parse_pitch_name, spell_midi
from .tuning import STANDARD_TUNING, TuningConfiguration

if TYPE_CHECKING:
    from .interval import Interval


def _exact_midi(frequency: float, tuning: TuningConfiguration) -> float:
    octaves = math.log2(frequency / tuning.reference_frequency)
    return tuning.reference_midi + SEMITONES_PER_OCTAVE * octaves


def frequency_to_name(frequency: float, tuning: TuningConfiguration = STANDARD_TUNING) -> str:
    """
    Name a frequency in scientific pitch notation.

    The nearest equal-tempered note is used; a signed cents suffix is added
    when the deviation exceeds the tuning's perceptual limit.

    Args:
        frequency: Frequency in Hz (> 0)
        tuning: Reference tuning

    Returns:
        Name like 'A4', 'C#3' or 'B7-12c'
    """
    if frequency <= 0:
        raise InvalidArgumentError(f"Frequency must be positive, got {frequency}")

    exact = _exact_midi(frequency, tuning)
    midi = round(exact)
    name = spell_midi(midi, tuning.prefer_flats)

    deviation = (exact - midi) * CENTS_PER_SEMITONE
    rounded = round(deviation)
    if abs(deviation) > tuning.perceptual_limit_cents and rounded != 0:
        name += format_cents(rounded)
    return name


def name_to_frequency(name: str, tuning: TuningConfiguration = STANDARD_TUNING) -> float:
    """
    Parse a scientific pitch name to its frequency.

    Raises:
        ParseError: If the name lacks a note letter or an octave
    """
    parsed = parse_pitch_name(name)
    return tuning.frequency_of(parsed.midi) * 2 ** (parsed.cents / CENTS_PER_OCTAVE)


def key_from_frequency(frequency: float, tuning: TuningConfiguration = STANDARD_TUNING) -> int:
    """Nearest piano key number for a frequency (A0 = 1, C8 = 88)."""
    if frequency <= 0:
        raise InvalidArgumentError(f"Frequency must be positive, got {frequency}")
    return round(_exact_midi(frequency, tuning)) - PIANO_LOWEST_MIDI + 1


def frequency_from_key(key: int, tuning: TuningConfiguration = STANDARD_TUNING) -> float:
    """Frequency of a piano key number (A0 = 1, C8 = 88)."""
    return tuning.frequency_of(key - 1 + PIANO_LOWEST_MIDI)


@total_ordering
@dataclass(frozen=True, eq=False)
class Pitch:
    """
    A frequency with a display name.

    Ordering, equality and hashing use the frequency only (compared to
    10 significant digits). The name is derived from the frequency when
    not given.

    Immutable and hashable.
    """

    frequency: float
    name: str = ""
    tuning: TuningConfiguration = field(default=STANDARD_TUNING, repr=False)

    def __post_init__(self) -> None:
        if self.frequency <= 0:
            raise InvalidArgumentError(f"Frequency must be positive, got {self.frequency}")
        if not self.name:
            object.__setattr__(self, "name", frequency_to_name(self.frequency, self.tuning))

    @classmethod
    def parse(cls, name: str, tuning: TuningConfiguration = STANDARD_TUNING) -> Pitch:
        """Parse a pitch from a name like 'C4', 'Bb3' or 'A4+20c'."""
        return cls(name_to_frequency(name, tuning), name.strip(), tuning)

    @classmethod
    def from_frequency(
        cls, frequency: float, tuning: TuningConfiguration = STANDARD_TUNING
    ) -> Pitch:
        """Create a pitch with a derived name."""
        return cls(frequency, tuning=tuning)

    @property
    def midi(self) -> int:
        """Nearest MIDI note number."""
        return round(_exact_midi(self.frequency, self.tuning))

    @property
    def cents_deviation(self) -> float:
        """Signed deviation from the nearest equal-tempered note, in cents."""
        return (_exact_midi(self.frequency, self.tuning) - self.midi) * CENTS_PER_SEMITONE

    def up(self, interval: Interval) -> Pitch:
        """Pitch an interval above this one."""
        return Pitch(self.frequency * interval.ratio, tuning=self.tuning)

    def down(self, interval: Interval) -> Pitch:
        """Pitch an interval below this one."""
        return Pitch(self.frequency / interval.ratio, tuning=self.tuning)

    def transpose(self, semitones: float) -> Pitch:
        """Transpose by equal-tempered semitones (positive or negative)."""
        return Pitch(
            self.frequency * 2 ** (semitones / SEMITONES_PER_OCTAVE), tuning=self.tuning
        )

    def overtone(self, number: int) -> Pitch:
        """
        The nth overtone (the fundamental is overtone 0).

        Negative numbers give undertones: overtone(-1) == undertone(1).
        """
        if number == 0:
            return self
        if number < 0:
            return Pitch(self.frequency / (1 - number), tuning=self.tuning)
        return Pitch(self.frequency * (number + 1), tuning=self.tuning)

    def undertone(self, number: int) -> Pitch:
        """The nth undertone: frequency / (n + 1)."""
        return self.overtone(-number)

    @property
    def _key(self) -> float:
        return round_significant(self.frequency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self.name
