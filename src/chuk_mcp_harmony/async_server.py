#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server provides MCP tools for just-intonation harmonic analysis.
Intervals are rationalized to the simplest fraction within a few cents,
and chords are ranked and resolved by the arithmetic of those fractions.

The server provides tools for:
- Naming frequencies and measuring intervals
- Rationalizing frequency ratios (Stern-Brocot search)
- Ranking structures by complexity (LCM/GCD of their fractions)
- Finding a chord's sub-chords, common undertone and common overtone
- Tuning discovery (reference pitch and tolerances)
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.tools import (
    register_chord_tools,
    register_pitch_tools,
    register_structure_tools,
    register_tuning_tools,
)
from chuk_mcp_harmony.tunings import TuningLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
TUNINGS_DIR = Path(os.environ.get("CHUK_HARMONY_TUNINGS_DIR", BASE_PATH / "tunings"))
TUNINGS_LIBRARY_PATH = Path(__file__).parent / "tunings" / "library"

tuning_loader = TuningLoader(
    library_path=TUNINGS_LIBRARY_PATH,
    project_path=TUNINGS_DIR,
)

# Register all tools
pitch_tools = register_pitch_tools(mcp, tuning_loader)
structure_tools = register_structure_tools(mcp, tuning_loader)
chord_tools = register_chord_tools(mcp, tuning_loader)
tuning_tools = register_tuning_tools(mcp, tuning_loader)

# Export tool functions for direct access
harmony_name_frequency = pitch_tools["harmony_name_frequency"]
harmony_parse_pitch = pitch_tools["harmony_parse_pitch"]
harmony_interval_between = pitch_tools["harmony_interval_between"]
harmony_rationalize = pitch_tools["harmony_rationalize"]

harmony_analyze_structure = structure_tools["harmony_analyze_structure"]
harmony_invert_structure = structure_tools["harmony_invert_structure"]
harmony_rank_structures = structure_tools["harmony_rank_structures"]

harmony_analyze_chord = chord_tools["harmony_analyze_chord"]
harmony_invert_chord = chord_tools["harmony_invert_chord"]
harmony_sub_chords = chord_tools["harmony_sub_chords"]
harmony_resolutions = chord_tools["harmony_resolutions"]

harmony_list_tunings = tuning_tools["harmony_list_tunings"]
harmony_describe_tuning = tuning_tools["harmony_describe_tuning"]

logger.info("CHUK Harmony MCP Server initialized")
logger.info(f"  Tuning library: {TUNINGS_LIBRARY_PATH}")
logger.info(f"  Project tunings dir: {TUNINGS_DIR}")
