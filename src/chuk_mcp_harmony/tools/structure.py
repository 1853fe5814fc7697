"""
Structure tools - MCP tools for abstract chord shapes.

Tools for analyzing a structure pattern, inverting it, and ranking
every distinct structure of a size by consonance.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_mcp_harmony.core import Structure
from chuk_mcp_harmony.models import StructureSummary
from chuk_mcp_harmony.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_structure_tools(
    mcp: ChukMCPServer,
    tuning_loader: TuningLoader,
) -> dict[str, Any]:
    """
    Register structure tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tuning_loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_analyze_structure(pattern: str, tuning: str = "standard") -> str:
        """
        Analyze a structure pattern.

        Returns each interval with its just-intonation fraction, the
        complexity (LCM/GCD of the fractions) and the interval vector.

        Args:
            pattern: Scale-degree pattern like '1 3 5' or '1 3b 5 7b'
            tuning: Tuning name, for the approximation tolerance

        Returns:
            JSON string with the structure summary

        Example:
            harmony_analyze_structure(pattern="1 3 5 7")
        """
        try:
            config = tuning_loader.require_tuning(tuning)
            structure = Structure.parse(pattern)

            return json.dumps(
                {
                    "status": "success",
                    "structure": StructureSummary.from_structure(
                        structure, config.tolerance_cents
                    ).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to analyze structure")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_analyze_structure"] = harmony_analyze_structure

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_invert_structure(pattern: str, number: int) -> str:
        """
        Invert a structure.

        Args:
            pattern: Scale-degree pattern like '1 3 5'
            number: Inversion number (0 = root position, must be < size)

        Returns:
            JSON string with the inverted pattern and interval names

        Example:
            harmony_invert_structure(pattern="1 3 5", number=1)  # -> '1 3b 6b'
        """
        try:
            inverted = Structure.parse(pattern).inversion(number)

            return json.dumps(
                {
                    "status": "success",
                    "pattern": inverted.pattern,
                    "intervals": [interval.name for interval in inverted],
                }
            )
        except Exception as e:
            logger.exception("Failed to invert structure")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_invert_structure"] = harmony_invert_structure

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_rank_structures(
        size: int,
        limit: int | None = None,
        tuning: str = "standard",
    ) -> str:
        """
        Rank every distinct structure of a size from most to least consonant.

        Structures that are inversions of each other are listed once.

        Args:
            size: Number of notes (1-12)
            limit: Maximum number of structures to return (default: all)
            tuning: Tuning name, for the approximation tolerance

        Returns:
            JSON string with ranked patterns and complexities

        Example:
            harmony_rank_structures(size=3, limit=5)
        """
        try:
            if size < 1 or size > SEMITONES_PER_OCTAVE:
                raise ValueError(ErrorMessages.STRUCTURE_SIZE.format(size=size))

            config = tuning_loader.require_tuning(tuning)
            ranked = Structure.all_combinations(size, config.tolerance_cents)
            total = len(ranked)
            if limit is not None:
                ranked = ranked[:limit]

            return json.dumps(
                {
                    "status": "success",
                    "size": size,
                    "structures": [
                        {
                            "pattern": structure.pattern,
                            "intervals": [interval.name for interval in structure],
                            "complexity": structure.complexity(config.tolerance_cents),
                            "normalized_complexity": round(
                                structure.normalized_complexity(config.tolerance_cents), 6
                            ),
                        }
                        for structure in ranked
                    ],
                    "total": total,
                }
            )
        except Exception as e:
            logger.exception("Failed to rank structures")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_rank_structures"] = harmony_rank_structures

    return tools
