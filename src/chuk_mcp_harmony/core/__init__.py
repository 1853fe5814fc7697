"""
Core harmony primitives - exact arithmetic and the pitch model.

These are the value types everything else composes on:
- Rational: Exact fractions with rational gcd/lcm
- approximate / approximate_within_cents: Stern-Brocot approximation
- TuningConfiguration: Reference pitch and thresholds
- Pitch: A named frequency
- Interval: A frequency ratio >= 1, rationalizable to a small fraction
- Structure: Sorted intervals above a root, with complexity and inversions
- Chord: A structure on a root pitch, with sub-chords and resolutions
"""

from chuk_mcp_harmony.core.approximation import (
    approximate,
    approximate_cfe,
    approximate_within_cents,
    cents_between,
    continued_fraction,
    stern_brocot_walk,
)
from chuk_mcp_harmony.core.chord import Chord
from chuk_mcp_harmony.core.errors import (
    DivisionByZeroError,
    HarmonyError,
    InvalidArgumentError,
    ParseError,
    UnsupportedInversionError,
)
from chuk_mcp_harmony.core.interval import CHROMATIC_INTERVALS, Interval, name_from_ratio
from chuk_mcp_harmony.core.notation import PitchClass, parse_pitch_name
from chuk_mcp_harmony.core.pitch import (
    Pitch,
    frequency_from_key,
    frequency_to_name,
    key_from_frequency,
    name_to_frequency,
)
from chuk_mcp_harmony.core.rational import Rational, gcd, lcm
from chuk_mcp_harmony.core.structure import Structure
from chuk_mcp_harmony.core.tuning import STANDARD_TUNING, TuningConfiguration

__all__ = [
    # Arithmetic
    "Rational",
    "gcd",
    "lcm",
    "approximate",
    "approximate_cfe",
    "approximate_within_cents",
    "cents_between",
    "continued_fraction",
    "stern_brocot_walk",
    # Errors
    "HarmonyError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "ParseError",
    "UnsupportedInversionError",
    # Pitch
    "PitchClass",
    "parse_pitch_name",
    "TuningConfiguration",
    "STANDARD_TUNING",
    "Pitch",
    "frequency_to_name",
    "name_to_frequency",
    "key_from_frequency",
    "frequency_from_key",
    # Interval
    "Interval",
    "CHROMATIC_INTERVALS",
    "name_from_ratio",
    # Structure & chord
    "Structure",
    "Chord",
]
