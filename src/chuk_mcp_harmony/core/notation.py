"""
Scientific pitch notation - PitchClass and name parsing.

Names follow ``<letter><accidentals><octave>[<+|-><cents>c]``,
for example ``A4``, ``C#3``, ``Bb-1``, ``Ab3-20c``.
Accidentals: ``#`` (sharp), ``b`` (flat), ``x``/``X`` (double sharp).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_harmony.constants import SEMITONES_PER_OCTAVE

from .errors import ParseError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

_ACCIDENTALS: dict[str, int] = {"#": 1, "b": -1, "x": 2, "X": 2}

_NAME_PATTERN = re.compile(
    r"^(?P<letter>[A-G])"
    r"(?P<accidentals>[#bxX]*)"
    r"(?P<octave>-?\d+)"
    r"(?:(?P<cents>[+-]\d+(?:\.\d+)?)c)?$"
)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11), octave-independent.

    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % SEMITONES_PER_OCTAVE)


@dataclass(frozen=True)
class PitchName:
    """A parsed scientific pitch name."""

    letter: str
    alteration: int
    octave: int
    cents: float = 0.0

    @property
    def midi(self) -> int:
        """MIDI note number of the nominal (cents-free) pitch. C4 = 60."""
        base = PitchClass[self.letter].value
        return base + self.alteration + (self.octave + 1) * SEMITONES_PER_OCTAVE


def parse_pitch_name(name: str) -> PitchName:
    """
    Parse a scientific pitch name.

    Raises:
        ParseError: If the letter or the octave is missing
    """
    text = name.strip()
    match = _NAME_PATTERN.match(text)
    if match is None:
        if not text or text[0] not in "ABCDEFG":
            raise ParseError(f"Pitch name must start with a note letter A-G: {name!r}")
        if not re.search(r"\d", text):
            raise ParseError(f"Pitch name must include octave information: {name!r}")
        raise ParseError(f"Malformed pitch name: {name!r}")

    alteration = sum(_ACCIDENTALS[symbol] for symbol in match.group("accidentals"))
    cents = float(match.group("cents")) if match.group("cents") else 0.0
    return PitchName(
        letter=match.group("letter"),
        alteration=alteration,
        octave=int(match.group("octave")),
        cents=cents,
    )


def spell_midi(midi_note: int, prefer_flats: bool = False) -> str:
    """Spell a MIDI note number as a name with octave, e.g. 60 -> 'C4'."""
    pitch_class = PitchClass.from_midi(midi_note)
    octave = midi_note // SEMITONES_PER_OCTAVE - 1
    return f"{pitch_class.spell(prefer_flats)}{octave}"


def format_cents(cents: int) -> str:
    """Format a cents deviation as a name suffix, e.g. -14 -> '-14c'."""
    sign = "+" if cents > 0 else "-"
    return f"{sign}{abs(cents)}c"
