#!/usr/bin/env python3
"""
Example: Ranking chord structures by consonance.

Every structure of a size is built from the 12 chromatic intervals,
rationalized to just-intonation fractions, and ranked by complexity
(LCM / GCD of those fractions). Inversions of the same shape are listed
once, under their most consonant form.

Usage:
    python examples/rank_structures.py [size] [count]
"""

import sys

from chuk_mcp_harmony.core import Structure


def main() -> None:
    """Print the most consonant structures of a size."""
    size = int(sys.argv[1]) if len(sys.argv) > 1 else 3
    count = int(sys.argv[2]) if len(sys.argv) > 2 else 12

    print(f"CHUK Harmony - the {count} most consonant structures of {size} notes")
    print("=" * 60)
    print()

    ranked = Structure.all_combinations(size)
    print(f"{len(ranked)} distinct structures (inversions collapsed)")
    print()

    print(f"{'pattern':<16} {'intervals':<24} {'fractions':<20} complexity")
    for structure in ranked[:count]:
        fractions = ":".join(str(r) for r in structure.rationals())
        print(
            f"{structure.pattern:<16} {str(structure):<24} {fractions:<20} "
            f"{structure.complexity():g}"
        )


if __name__ == "__main__":
    main()
