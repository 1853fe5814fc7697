"""
Analysis models - serializable views of the core value types.

The core types are plain immutable values; these pydantic models are
what leaves the process (tool responses, exported catalogs).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_harmony.core.approximation import cents_between
from chuk_mcp_harmony.core.chord import Chord
from chuk_mcp_harmony.core.interval import Interval
from chuk_mcp_harmony.core.pitch import Pitch
from chuk_mcp_harmony.core.structure import Structure
from chuk_mcp_harmony.core.tuning import TuningConfiguration


class PitchInfo(BaseModel):
    """A pitch with its derived measurements."""

    name: str = Field(..., description="Scientific pitch name, e.g. 'C4' or 'B7-12c'")
    frequency: float = Field(..., gt=0, description="Frequency in Hz")
    midi: int = Field(..., description="Nearest MIDI note number")
    cents_deviation: float = Field(..., description="Deviation from the nearest note")

    model_config = {"frozen": True}

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> PitchInfo:
        return cls(
            name=pitch.name,
            frequency=round(pitch.frequency, 6),
            midi=pitch.midi,
            cents_deviation=round(pitch.cents_deviation, 2),
        )


class IntervalInfo(BaseModel):
    """An interval with its just-intonation approximation."""

    name: str
    ratio: float = Field(..., ge=1)
    cents: float
    rational: str = Field(..., description="Approximating fraction, e.g. '5/4'")
    rational_error_cents: float = Field(..., ge=0)

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval, tolerance_cents: float) -> IntervalInfo:
        rational = interval.rationalize(tolerance_cents)
        return cls(
            name=interval.name,
            ratio=round(interval.ratio, 10),
            cents=round(interval.cents, 2),
            rational=str(rational),
            rational_error_cents=round(cents_between(interval.ratio, float(rational)), 2),
        )


class StructureSummary(BaseModel):
    """A structure's intervals and consonance measures."""

    pattern: str
    intervals: list[IntervalInfo]
    complexity: float
    normalized_complexity: float
    interval_vector: list[int]

    @classmethod
    def from_structure(cls, structure: Structure, tolerance_cents: float) -> StructureSummary:
        return cls(
            pattern=structure.pattern,
            intervals=[
                IntervalInfo.from_interval(interval, tolerance_cents) for interval in structure
            ],
            complexity=structure.complexity(tolerance_cents),
            normalized_complexity=round(structure.normalized_complexity(tolerance_cents), 6),
            interval_vector=list(structure.interval_vector()),
        )


class ChordAnalysis(BaseModel):
    """A chord with its structure and resolution pitches."""

    root: PitchInfo
    notes: list[PitchInfo]
    structure: StructureSummary
    gcu: PitchInfo = Field(..., description="Greatest common undertone")
    lco: PitchInfo = Field(..., description="Least common overtone")

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordAnalysis:
        tolerance = chord.root.tuning.tolerance_cents
        return cls(
            root=PitchInfo.from_pitch(chord.root),
            notes=[PitchInfo.from_pitch(note) for note in chord.notes],
            structure=StructureSummary.from_structure(chord.structure, tolerance),
            gcu=PitchInfo.from_pitch(chord.gcu()),
            lco=PitchInfo.from_pitch(chord.lco()),
        )


class ResolutionVote(BaseModel):
    """Weighted votes for one resolution pitch."""

    pitch: str
    votes: int = Field(..., ge=0)

    model_config = {"frozen": True}


class TuningMetadata(BaseModel):
    """Lightweight metadata for listing tunings."""

    name: str
    description: str
    reference_pitch: str
    reference_frequency: float

    model_config = {"frozen": True}

    @classmethod
    def from_tuning(cls, tuning: TuningConfiguration) -> TuningMetadata:
        return cls(
            name=tuning.name,
            description=tuning.description,
            reference_pitch=tuning.reference_pitch,
            reference_frequency=tuning.reference_frequency,
        )
