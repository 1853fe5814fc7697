"""
Tuning system - reference pitches and approximation thresholds.

Tunings are explicit values, never process-wide state. The loader
discovers them from YAML files so projects can add their own.
"""

from chuk_mcp_harmony.tunings.loader import TuningLoader

__all__ = ["TuningLoader"]
