#!/usr/bin/env python3
"""
Example: Where does a chord want to go?

For every sub-chord, the greatest common undertone (the fundamental the
notes share) and the least common overtone (the harmonic they share) each
get a vote weighted by the sub-chord's size.

Usage:
    python examples/chord_resolutions.py [root] [pattern]
    python examples/chord_resolutions.py G3 "1 3 5 7b"
"""

import sys

from chuk_mcp_harmony.core import Chord


def main() -> None:
    """Print the sub-chords and resolution tally of a chord."""
    root = sys.argv[1] if len(sys.argv) > 1 else "C4"
    pattern = sys.argv[2] if len(sys.argv) > 2 else "1 3 5"

    chord = Chord.from_pattern(root, pattern)
    print(f"CHUK Harmony - {chord} ({chord.structure.pattern})")
    print("=" * 60)
    print(f"  Complexity: {chord.complexity():g}")
    print(f"  GCU: {chord.gcu()}")
    print(f"  LCO: {chord.lco()}")
    print()

    print("Sub-chords:")
    for sub in chord.sub_chords():
        print(f"  {str(sub):<28} GCU {str(sub.gcu()):<10} LCO {sub.lco()}")
    print()

    print("Resolutions:")
    for name, votes in chord.solutions().items():
        print(f"  {name:<10} {'#' * votes} {votes}")


if __name__ == "__main__":
    main()
