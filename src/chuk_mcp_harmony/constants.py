"""
Constants for the harmony system.

No magic numbers - approximation tolerances, naming thresholds and the
chromatic interval vocabulary live here.
"""

from typing import Final

# Pitch arithmetic
SEMITONES_PER_OCTAVE: Final = 12
CENTS_PER_SEMITONE: Final = 100
CENTS_PER_OCTAVE: Final = 1200

# Reference pitch (concert A)
DEFAULT_REFERENCE_PITCH: Final = "A4"
DEFAULT_REFERENCE_FREQUENCY: Final = 440.0

# Rational approximation of interval ratios.
# 16 cents yields small just-intonation fractions for the chromatic intervals.
DEFAULT_TOLERANCE_CENTS: Final = 16.0

# Deviations above this are shown as a cents suffix on pitch/interval names
DEFAULT_PERCEPTUAL_LIMIT_CENTS: Final = 6.0

# Stern-Brocot search
APPROXIMATION_DECIMALS: Final = 10
MAX_APPROXIMATION_TERMS: Final = 10_000

# Continued fraction expansion stops once the remainder drops below this
CFE_EPSILON: Final = 1e-8

# Frequencies and ratios compare equal when they agree to this many digits
EQUALITY_SIGNIFICANT_DIGITS: Final = 10

# Interval class names, unison through major seventh
INTERVAL_CLASS_NAMES: Final = (
    "U1",
    "m2",
    "M2",
    "m3",
    "M3",
    "P4",
    "TT",
    "P5",
    "m6",
    "M6",
    "m7",
    "M7",
)

# Piano key numbering (A0 is key 1)
PIANO_LOWEST_MIDI: Final = 21


class ErrorMessages:
    """Standardized error messages."""

    TUNING_NOT_FOUND = "Tuning '{name}' not found."
    NO_PITCHES = "Provide either a root and pattern or a list of notes."
    STRUCTURE_SIZE = "Structure size must be between 1 and 12, got {size}."
