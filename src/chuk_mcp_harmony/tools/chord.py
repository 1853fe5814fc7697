"""
Chord tools - MCP tools for concrete chords.

A chord is given either as a root plus a structure pattern, or as an
explicit list of pitch names. Tools analyze it, invert it, enumerate its
sub-chords and tally where it wants to resolve.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core import Chord, Pitch
from chuk_mcp_harmony.models import ChordAnalysis, PitchInfo, ResolutionVote
from chuk_mcp_harmony.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _build_chord(
    tuning_loader: TuningLoader,
    root: str | None,
    pattern: str | None,
    notes: list[str] | None,
    tuning: str,
) -> Chord:
    """Build a chord from either root + pattern or explicit note names."""
    config = tuning_loader.require_tuning(tuning)
    if notes:
        return Chord.from_pitches(Pitch.parse(name, config) for name in notes)
    if root and pattern:
        return Chord.from_pattern(root, pattern, config)
    raise ValueError(ErrorMessages.NO_PITCHES)


def register_chord_tools(
    mcp: ChukMCPServer,
    tuning_loader: TuningLoader,
) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tuning_loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_analyze_chord(
        root: str | None = None,
        pattern: str | None = None,
        notes: list[str] | None = None,
        tuning: str = "standard",
    ) -> str:
        """
        Analyze a chord.

        Provide either root + pattern, or a list of notes (the lowest
        becomes the root).

        Args:
            root: Root pitch name like 'C4'
            pattern: Scale-degree pattern like '1 3 5'
            notes: Explicit pitch names like ['C4', 'E4', 'G4']
            tuning: Tuning name (default: 'standard')

        Returns:
            JSON string with notes, structure, complexity, GCU and LCO

        Example:
            harmony_analyze_chord(root="C4", pattern="1 3 5")
        """
        try:
            chord = _build_chord(tuning_loader, root, pattern, notes, tuning)

            return json.dumps(
                {
                    "status": "success",
                    "chord": ChordAnalysis.from_chord(chord).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to analyze chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_analyze_chord"] = harmony_analyze_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_invert_chord(
        number: int,
        root: str | None = None,
        pattern: str | None = None,
        notes: list[str] | None = None,
        tuning: str = "standard",
    ) -> str:
        """
        Invert a chord by raising its lowest notes an octave.

        Args:
            number: Inversion number (0 = root position, must be < size)
            root: Root pitch name
            pattern: Scale-degree pattern
            notes: Explicit pitch names (alternative to root + pattern)
            tuning: Tuning name (default: 'standard')

        Returns:
            JSON string with the inverted chord's notes and pattern

        Example:
            harmony_invert_chord(number=1, root="C4", pattern="1 3 5")
        """
        try:
            chord = _build_chord(tuning_loader, root, pattern, notes, tuning)
            inverted = chord.inversion(number)

            return json.dumps(
                {
                    "status": "success",
                    "root": inverted.root.name,
                    "notes": inverted.names,
                    "pattern": inverted.structure.pattern,
                }
            )
        except Exception as e:
            logger.exception("Failed to invert chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_invert_chord"] = harmony_invert_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_sub_chords(
        root: str | None = None,
        pattern: str | None = None,
        notes: list[str] | None = None,
        tuning: str = "standard",
    ) -> str:
        """
        List every sub-chord of two or more notes.

        Each sub-chord is reported with its complexity and its GCU/LCO.

        Args:
            root: Root pitch name
            pattern: Scale-degree pattern
            notes: Explicit pitch names (alternative to root + pattern)
            tuning: Tuning name (default: 'standard')

        Returns:
            JSON string with the list of sub-chords

        Example:
            harmony_sub_chords(root="C4", pattern="1 3 5 7")
        """
        try:
            chord = _build_chord(tuning_loader, root, pattern, notes, tuning)
            sub_chords = chord.sub_chords()

            return json.dumps(
                {
                    "status": "success",
                    "sub_chords": [
                        {
                            "notes": sub.names,
                            "complexity": sub.complexity(),
                            "gcu": PitchInfo.from_pitch(sub.gcu()).model_dump(),
                            "lco": PitchInfo.from_pitch(sub.lco()).model_dump(),
                        }
                        for sub in sub_chords
                    ],
                    "total": len(sub_chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to list sub-chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_sub_chords"] = harmony_sub_chords

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_resolutions(
        root: str | None = None,
        pattern: str | None = None,
        notes: list[str] | None = None,
        tuning: str = "standard",
    ) -> str:
        """
        Tally where a chord wants to resolve.

        Every sub-chord votes for its GCU and its LCO, weighted by its
        note count. Pitches are returned in ascending order.

        Args:
            root: Root pitch name
            pattern: Scale-degree pattern
            notes: Explicit pitch names (alternative to root + pattern)
            tuning: Tuning name (default: 'standard')

        Returns:
            JSON string with the resolution votes

        Example:
            harmony_resolutions(root="C4", pattern="1 3 5")
        """
        try:
            chord = _build_chord(tuning_loader, root, pattern, notes, tuning)
            solutions = chord.solutions()

            return json.dumps(
                {
                    "status": "success",
                    "chord": chord.names,
                    "resolutions": [
                        ResolutionVote(pitch=name, votes=votes).model_dump()
                        for name, votes in solutions.items()
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to tally resolutions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_resolutions"] = harmony_resolutions

    return tools
