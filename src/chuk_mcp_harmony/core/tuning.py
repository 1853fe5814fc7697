"""
Tuning configuration - the reference pitch and approximation thresholds.

A tuning is an explicit immutable value passed to pitch naming and parsing,
so several tunings can coexist (A440 next to baroque A415).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_harmony.constants import (
    DEFAULT_PERCEPTUAL_LIMIT_CENTS,
    DEFAULT_REFERENCE_FREQUENCY,
    DEFAULT_REFERENCE_PITCH,
    DEFAULT_TOLERANCE_CENTS,
    SEMITONES_PER_OCTAVE,
)

from .notation import parse_pitch_name


class TuningConfiguration(BaseModel):
    """
    Reference pitch plus the thresholds that shape naming and approximation.

    Twelve-tone equal temperament is assumed; the reference pitch anchors it.
    """

    name: str = Field(default="standard", description="Tuning identifier")
    description: str = Field(default="", description="Human-readable description")
    reference_pitch: str = Field(
        default=DEFAULT_REFERENCE_PITCH,
        description="Scientific pitch name of the reference note",
    )
    reference_frequency: float = Field(
        default=DEFAULT_REFERENCE_FREQUENCY,
        gt=0,
        description="Frequency of the reference note in Hz",
    )
    tolerance_cents: float = Field(
        default=DEFAULT_TOLERANCE_CENTS,
        ge=0,
        description="Allowed error when rationalizing interval ratios",
    )
    perceptual_limit_cents: float = Field(
        default=DEFAULT_PERCEPTUAL_LIMIT_CENTS,
        ge=0,
        description="Deviations above this are shown as a cents suffix",
    )
    prefer_flats: bool = Field(default=False, description="Spell black keys with flats")

    model_config = {"frozen": True}

    @field_validator("reference_pitch")
    @classmethod
    def validate_reference_pitch(cls, v: str) -> str:
        """Reference pitch must be a plain scientific pitch name."""
        parsed = parse_pitch_name(v)
        if parsed.cents:
            raise ValueError(f"Reference pitch cannot carry a cents offset: {v}")
        return v.strip()

    @property
    def reference_midi(self) -> int:
        """MIDI note number of the reference pitch."""
        return parse_pitch_name(self.reference_pitch).midi

    def frequency_of(self, midi_note: float) -> float:
        """Equal-tempered frequency of a (possibly fractional) MIDI note number."""
        semitones = midi_note - self.reference_midi
        return self.reference_frequency * 2 ** (semitones / SEMITONES_PER_OCTAVE)


STANDARD_TUNING = TuningConfiguration(
    name="standard",
    description="Concert pitch, A4 = 440 Hz, twelve-tone equal temperament",
)
