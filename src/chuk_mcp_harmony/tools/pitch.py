"""
Pitch tools - MCP tools for naming pitches and measuring intervals.

Tools for converting between frequencies and scientific pitch names,
measuring intervals and rationalizing frequency ratios.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.core import (
    Interval,
    Pitch,
    approximate_cfe,
    approximate_within_cents,
    cents_between,
    key_from_frequency,
)
from chuk_mcp_harmony.models import IntervalInfo, PitchInfo
from chuk_mcp_harmony.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

# Partial quotients used for the continued-fraction comparison
_CFE_TERMS = 4


def register_pitch_tools(
    mcp: ChukMCPServer,
    tuning_loader: TuningLoader,
) -> dict[str, Any]:
    """
    Register pitch and interval tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tuning_loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_name_frequency(frequency: float, tuning: str = "standard") -> str:
        """
        Name a frequency in scientific pitch notation.

        Args:
            frequency: Frequency in Hz
            tuning: Tuning name (default: 'standard', A4 = 440 Hz)

        Returns:
            JSON string with the pitch name, MIDI number and cents deviation

        Example:
            harmony_name_frequency(frequency=445.0)
        """
        try:
            config = tuning_loader.require_tuning(tuning)
            pitch = Pitch.from_frequency(frequency, config)

            return json.dumps(
                {
                    "status": "success",
                    "pitch": PitchInfo.from_pitch(pitch).model_dump(),
                    "piano_key": key_from_frequency(frequency, config),
                }
            )
        except Exception as e:
            logger.exception("Failed to name frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_name_frequency"] = harmony_name_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_parse_pitch(name: str, tuning: str = "standard") -> str:
        """
        Get the frequency of a scientific pitch name.

        Args:
            name: Pitch name like 'C4', 'Bb3' or 'A4+20c'
            tuning: Tuning name (default: 'standard')

        Returns:
            JSON string with the pitch frequency

        Example:
            harmony_parse_pitch(name="C4")
        """
        try:
            config = tuning_loader.require_tuning(tuning)
            pitch = Pitch.parse(name, config)

            return json.dumps(
                {
                    "status": "success",
                    "pitch": PitchInfo.from_pitch(pitch).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to parse pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_parse_pitch"] = harmony_parse_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_interval_between(
        lower: str,
        upper: str,
        tuning: str = "standard",
    ) -> str:
        """
        Measure the interval between two pitches.

        Order does not matter - intervals are always ratios >= 1.

        Args:
            lower: First pitch name
            upper: Second pitch name
            tuning: Tuning name (default: 'standard')

        Returns:
            JSON string with the interval name, ratio, cents and rational form

        Example:
            harmony_interval_between(lower="C4", upper="G4")
        """
        try:
            config = tuning_loader.require_tuning(tuning)
            interval = Interval.between(Pitch.parse(lower, config), Pitch.parse(upper, config))

            return json.dumps(
                {
                    "status": "success",
                    "interval": IntervalInfo.from_interval(
                        interval, config.tolerance_cents
                    ).model_dump(),
                }
            )
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_interval_between"] = harmony_interval_between

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_rationalize(
        ratio: float,
        tolerance_cents: float | None = None,
        tuning: str = "standard",
    ) -> str:
        """
        Find the simplest fraction within a cents tolerance of a ratio.

        Uses a Stern-Brocot search; the continued-fraction convergent is
        returned alongside for comparison.

        Args:
            ratio: Frequency ratio (> 0)
            tolerance_cents: Allowed error (default: the tuning's tolerance, 16)
            tuning: Tuning name (default: 'standard')

        Returns:
            JSON string with the approximating fraction and its error

        Example:
            harmony_rationalize(ratio=1.2599)  # -> 5/4
        """
        try:
            config = tuning_loader.require_tuning(tuning)
            tolerance = config.tolerance_cents if tolerance_cents is None else tolerance_cents
            rational = approximate_within_cents(ratio, tolerance)
            convergent = approximate_cfe(ratio, _CFE_TERMS)

            return json.dumps(
                {
                    "status": "success",
                    "ratio": ratio,
                    "tolerance_cents": tolerance,
                    "rational": str(rational),
                    "error_cents": round(cents_between(ratio, float(rational)), 4),
                    "continued_fraction": str(convergent),
                }
            )
        except Exception as e:
            logger.exception("Failed to rationalize ratio")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_rationalize"] = harmony_rationalize

    return tools
