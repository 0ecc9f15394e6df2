"""
core/chords/types.py — Frozen value objects for the chord engine.

All types are immutable frozen dataclasses — safe to hash, share across
threads, and use as dict keys. No I/O, no side effects.

Types:
    IntervalVector    — ascending root-relative semitone distances (the lookup key)
    ChordCandidate    — a full chord name plus where the search found it
    CandidateScore    — score-equivalence key used to group candidates
    DetectionOptions  — caller options for detect_chord()
    SingleChord       — detection result carrying one name
    ChordList         — detection result carrying every co-equal best name
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, NamedTuple

# ---------------------------------------------------------------------------
# Enumerations (plain string constants, validated where they are consumed)
# ---------------------------------------------------------------------------

AccidentalNotation = Literal["sharp", "flat"]
KeyMode = Literal["major", "minor"]

VALID_NOTATIONS: frozenset[str] = frozenset({"sharp", "flat"})
VALID_KEY_MODES: frozenset[str] = frozenset({"major", "minor"})

# Chord table a candidate came from, in lookup priority order
SOURCE_STATIC = "static"
SOURCE_GENERATED = "generated"
SOURCE_GENERATED_OMIT = "generated_omit"
CHORD_SOURCES: tuple[str, ...] = (SOURCE_STATIC, SOURCE_GENERATED, SOURCE_GENERATED_OMIT)

# Search pass that produced a candidate
PASS_DIRECT = "direct"
PASS_BASS_REMOVED = "bass_removed"
PASS_ROTATION = "rotation"
SEARCH_PASSES: tuple[str, ...] = (PASS_DIRECT, PASS_BASS_REMOVED, PASS_ROTATION)

# Tonic spellings offered for degree notation (Unicode accidentals)
TONIC_NOTES: tuple[str, ...] = (
    "C",
    "C♯",
    "D",
    "E♭",
    "E",
    "F",
    "F♯",
    "G",
    "A♭",
    "A",
    "B♭",
    "B",
)

# ---------------------------------------------------------------------------
# IntervalVector
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IntervalVector:
    """Root-relative semitone distances of a chord shape.

    Canonical form: starts at 0, strictly ascending, every value in [0, 11].

    Examples:
        IntervalVector((0, 4, 7))      # major triad, key "0,4,7"
        IntervalVector((0, 3, 6, 9))   # diminished seventh
    """

    intervals: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.intervals:
            raise ValueError("IntervalVector must not be empty")
        if self.intervals[0] != 0:
            raise ValueError(f"IntervalVector must start at 0, got {self.intervals}")
        for value in self.intervals:
            if not (0 <= value <= 11):
                raise ValueError(f"Interval {value} out of range [0, 11]")
        if any(a >= b for a, b in zip(self.intervals, self.intervals[1:])):
            raise ValueError(f"IntervalVector must be strictly ascending, got {self.intervals}")

    @classmethod
    def from_intervals(cls, intervals: Iterable[int]) -> IntervalVector:
        """Build the canonical vector from any iterable of intervals.

        Values are reduced modulo 12, de-duplicated and sorted; 0 is added
        when missing so the root is always part of the shape.
        """
        values = {int(i) % 12 for i in intervals}
        values.add(0)
        return cls(tuple(sorted(values)))

    @property
    def key(self) -> str:
        """Comma-joined lookup key, e.g. '0,4,7'."""
        return ",".join(str(i) for i in self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)


# ---------------------------------------------------------------------------
# ChordCandidate / CandidateScore
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordCandidate:
    """A fully formed chord name found by the candidate search.

    Attributes:
        name:         Full chord name, e.g. "C", "Am7/C", "E(♯5)"
        source:       Table that produced the suffix (see CHORD_SOURCES)
        search_pass:  Search pass that produced the name (see SEARCH_PASSES)
    """

    name: str
    source: str = SOURCE_GENERATED
    search_pass: str = PASS_DIRECT

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ChordCandidate.name must not be empty")
        if self.source not in CHORD_SOURCES:
            raise ValueError(f"Unknown chord source {self.source!r}, valid: {CHORD_SOURCES}")
        if self.search_pass not in SEARCH_PASSES:
            raise ValueError(f"Unknown search pass {self.search_pass!r}, valid: {SEARCH_PASSES}")

    @property
    def is_slash(self) -> bool:
        return self.search_pass != PASS_DIRECT


class CandidateScore(NamedTuple):
    """Score-equivalence key. Lower sorts first (more preferable)."""

    penalty: int
    omissions: int


# ---------------------------------------------------------------------------
# DetectionOptions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DetectionOptions:
    """Options for detect_chord().

    Attributes:
        accidental_notation: "sharp" or "flat" — selects the note-naming table.
        return_all:          Return every co-equal best name instead of the first.
        merge_parentheses:   Merge tension parentheticals, "(9)(13)" → "(9, 13)".

    Example:
        >>> options = DetectionOptions(accidental_notation="flat", return_all=True)
        >>> detect_chord({61, 65, 68}, options)
        ChordList(names=('D♭',), kind='multiple')
    """

    accidental_notation: str = "sharp"
    return_all: bool = False
    merge_parentheses: bool = True

    def __post_init__(self) -> None:
        if self.accidental_notation not in VALID_NOTATIONS:
            raise ValueError(
                f"Unknown accidental_notation {self.accidental_notation!r}, "
                f"valid options: {sorted(VALID_NOTATIONS)}"
            )


DEFAULT_OPTIONS = DetectionOptions()
"""Sharp spelling, first name only, parentheticals merged."""

# ---------------------------------------------------------------------------
# Detection results: explicit single / multiple variant
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SingleChord:
    """Result of detect_chord() with return_all=False. Empty name = no chord."""

    name: str
    kind: Literal["single"] = "single"

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,) if self.name else ()

    def __bool__(self) -> bool:
        return bool(self.name)


@dataclass(frozen=True)
class ChordList:
    """Result of detect_chord() with return_all=True. Empty tuple = no chord."""

    names: tuple[str, ...]
    kind: Literal["multiple"] = "multiple"

    @property
    def name(self) -> str:
        """First (preferred) name, or "" when nothing matched."""
        return self.names[0] if self.names else ""

    def __bool__(self) -> bool:
        return bool(self.names)


DetectionResult = SingleChord | ChordList
