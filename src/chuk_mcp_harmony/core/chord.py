"""
Chord primitive - a structure anchored at a concrete root pitch.

Beyond materializing notes, a chord can be searched: every sub-chord
reachable by dropping notes, and for each of them the pitch it resolves
to from below (greatest common undertone) and from above (least common
overtone).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import InvalidArgumentError
from .interval import Interval
from .pitch import Pitch
from .structure import Structure
from .tuning import STANDARD_TUNING, TuningConfiguration

logger = logging.getLogger(__name__)

NoteSet = tuple[Pitch, ...]


def _sub_note_sets(notes: NoteSet, memo: dict[NoteSet, list[NoteSet]]) -> list[NoteSet]:
    """
    All note sets reachable from a sorted note set, in discovery order.

    For every contiguous window of two or more notes: keep the window, then
    drop each interior note in turn and recurse into the result. The outer
    notes of a window are never dropped, so windows supply the boundaries
    and recursion supplies every non-contiguous subset in between.
    """
    if notes in memo:
        return memo[notes]

    # dict as an insertion-ordered set
    found: dict[NoteSet, None] = {}
    count = len(notes)
    for start in range(count):
        for end in range(count, start + 1, -1):
            window = notes[start:end]
            found.setdefault(window)
            for k in range(1, len(window) - 1):
                reduced = window[:k] + window[k + 1 :]
                found.setdefault(reduced)
                for sub in _sub_note_sets(reduced, memo):
                    found.setdefault(sub)

    result = list(found)
    memo[notes] = result
    return result


@dataclass(frozen=True, eq=False)
class Chord:
    """
    A root pitch plus a structure, materialized as sorted notes.

    ``notes[i] == root.up(structure.intervals[i])`` always holds. Equality
    and hashing use the notes only, so chords built from different
    root/structure descriptions of the same pitch set are equal.

    Immutable and hashable.
    """

    root: Pitch
    structure: Structure
    notes: NoteSet = field(init=False)

    def __post_init__(self) -> None:
        if not self.structure.intervals:
            raise InvalidArgumentError("A chord needs at least one interval")
        notes = tuple(sorted(self.root.up(interval) for interval in self.structure))
        object.__setattr__(self, "notes", notes)

    @classmethod
    def from_pattern(
        cls,
        root: Pitch | str,
        pattern: str,
        tuning: TuningConfiguration = STANDARD_TUNING,
    ) -> Chord:
        """
        Build a chord from a root and a scale-degree pattern.

        Example:
            Chord.from_pattern("C4", "1 3 5")  # C major triad
        """
        if isinstance(root, str):
            root = Pitch.parse(root, tuning)
        return cls(root, Structure.parse(pattern))

    @classmethod
    def from_pitches(cls, pitches: Iterable[Pitch]) -> Chord:
        """
        Build a chord from an arbitrary set of pitches.

        The lowest pitch becomes the root and every pitch is measured from it.
        Duplicate pitches are dropped.
        """
        unique = sorted(set(pitches))
        if not unique:
            raise InvalidArgumentError("A chord needs at least one pitch")
        root = unique[0]
        return cls(root, Structure(tuple(Interval.between(pitch, root) for pitch in unique)))

    @property
    def size(self) -> int:
        return len(self.notes)

    @property
    def names(self) -> list[str]:
        return [note.name for note in self.notes]

    def with_root(self, root: Pitch) -> Chord:
        """Same structure on a new root."""
        return Chord(root, self.structure)

    def with_structure(self, structure: Structure | str) -> Chord:
        """Same root with a new structure (or pattern)."""
        if isinstance(structure, str):
            structure = Structure.parse(structure)
        return Chord(self.root, structure)

    def inversion(self, number: int) -> Chord:
        """
        Raise the lowest ``number`` notes an octave and re-root on the new bass.

        For chords within an octave the new root is ``notes[number]``.

        Raises:
            UnsupportedInversionError: If number is outside [0, size)
        """
        root = self.root.up(self.structure.inversion_root(number))
        return Chord(root, self.structure.inversion(number))

    def _tolerance(self, tolerance_cents: float | None) -> float:
        if tolerance_cents is None:
            return self.root.tuning.tolerance_cents
        return tolerance_cents

    def complexity(self, tolerance_cents: float | None = None) -> float:
        """Dissonance measure of the chord's structure."""
        return self.structure.complexity(self._tolerance(tolerance_cents))

    def normalized_complexity(self, tolerance_cents: float | None = None) -> float:
        """Size-normalized dissonance measure of the chord's structure."""
        return self.structure.normalized_complexity(self._tolerance(tolerance_cents))

    def gcu(self, tolerance_cents: float | None = None) -> Pitch:
        """
        Greatest common undertone.

        The highest pitch whose overtone series contains every chord note,
        e.g. C2 for the C4 major triad (4:5:6). A single note is its own GCU.
        """
        if self.size == 1:
            return self.notes[0]
        undertone = self.structure.common_undertone(self._tolerance(tolerance_cents))
        return self.root.down(Interval(float(undertone.invert())))

    def lco(self, tolerance_cents: float | None = None) -> Pitch:
        """
        Least common overtone.

        The lowest pitch that is an overtone of every chord note. A single
        note is its own LCO.
        """
        if self.size == 1:
            return self.notes[0]
        overtone = self.structure.common_overtone(self._tolerance(tolerance_cents))
        return self.root.up(Interval(float(overtone)))

    def sub_chords(self) -> list[Chord]:
        """
        Every sub-chord of two or more notes reachable by dropping notes.

        Includes the chord itself. Results are unique by note set and in
        discovery order (widest windows first).
        """
        memo: dict[NoteSet, list[NoteSet]] = {}
        note_sets = _sub_note_sets(self.notes, memo)
        logger.debug("Found %d sub-chords of %s", len(note_sets), self)
        return [Chord.from_pitches(notes) for notes in note_sets]

    def solutions(self, tolerance_cents: float | None = None) -> dict[str, int]:
        """
        Tally the resolution pitches of every sub-chord.

        Each sub-chord votes for its GCU and for its LCO, each vote weighted
        by the sub-chord's note count.

        Returns:
            Mapping of pitch name to total votes, ordered by pitch
        """
        votes: dict[str, int] = {}
        anchors: dict[str, Pitch] = {}
        for chord in self.sub_chords():
            for pitch in (chord.gcu(tolerance_cents), chord.lco(tolerance_cents)):
                votes[pitch.name] = votes.get(pitch.name, 0) + chord.size
                anchors.setdefault(pitch.name, pitch)

        return {name: votes[name] for name in sorted(votes, key=lambda n: anchors[n])}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        return self.notes == other.notes

    def __hash__(self) -> int:
        return hash(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return "[" + ", ".join(note.name for note in self.notes) + "]"
