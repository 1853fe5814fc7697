"""
Pydantic models for the harmony system.

This module provides:
- PitchInfo: Pitch with MIDI number and cents deviation
- IntervalInfo: Interval with its rational approximation
- StructureSummary: Intervals plus complexity measures
- ChordAnalysis: Notes, structure, GCU and LCO
- ResolutionVote: Weighted resolution tally entry
- TuningMetadata: Tuning listing entry
"""

from chuk_mcp_harmony.models.analysis import (
    ChordAnalysis,
    IntervalInfo,
    PitchInfo,
    ResolutionVote,
    StructureSummary,
    TuningMetadata,
)

__all__ = [
    "ChordAnalysis",
    "IntervalInfo",
    "PitchInfo",
    "ResolutionVote",
    "StructureSummary",
    "TuningMetadata",
]
