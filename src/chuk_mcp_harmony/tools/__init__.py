"""
MCP tool implementations.

Tools are organized by domain:
- pitch - Frequency naming, intervals, rationalization
- structure - Structure analysis, inversion and ranking
- chord - Chord analysis, sub-chords and resolutions
- tuning - Tuning discovery
"""

from chuk_mcp_harmony.tools.chord import register_chord_tools
from chuk_mcp_harmony.tools.pitch import register_pitch_tools
from chuk_mcp_harmony.tools.structure import register_structure_tools
from chuk_mcp_harmony.tools.tuning import register_tuning_tools

__all__ = [
    "register_chord_tools",
    "register_pitch_tools",
    "register_structure_tools",
    "register_tuning_tools",
]
