"""
core/chords/notes.py — Note-name tables, pitch-class normalization, intervals.

Exports:
    SHARP_NOTE_NAMES        12 printable names, sharp spelling (C, C♯, D, …)
    FLAT_NOTE_NAMES         12 printable names, flat spelling (C, D♭, D, …)
    SEMITONES_PER_OCTAVE    12

    note_names(accidental_notation) → tuple[str, ...]
    note_to_pitch_class(name) → int | None
    pitch_class_to_note(pc, accidental_notation) → str
    normalize_pitch_classes(pitches, accidental_notation) → tuple[str, ...]
    to_interval_vector(note_names) → IntervalVector
    midi_to_note_name(midi, accidental_notation) → str

Lookups are case-insensitive and accept ASCII spellings ("C#", "Db") as well
as the Unicode glyphs used for display ("C♯", "D♭").
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from core.chords.types import VALID_NOTATIONS, IntervalVector

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Note-name tables
# ---------------------------------------------------------------------------

SEMITONES_PER_OCTAVE = 12
MIDI_MIN = 0
MIDI_MAX = 127

SHARP = "♯"
FLAT = "♭"

SHARP_NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C♯",
    "D",
    "D♯",
    "E",
    "F",
    "F♯",
    "G",
    "G♯",
    "A",
    "A♯",
    "B",
)

FLAT_NOTE_NAMES: tuple[str, ...] = (
    "C",
    "D♭",
    "D",
    "E♭",
    "E",
    "F",
    "G♭",
    "G",
    "A♭",
    "A",
    "B♭",
    "B",
)

# Enharmonic spellings that fall outside both display tables
_EXTRA_SPELLINGS: dict[str, int] = {
    "E♯": 5,
    "B♯": 0,
    "F♭": 4,
    "C♭": 11,
}


def _build_lookup() -> dict[str, int]:
    lookup: dict[str, int] = {}
    spellings = [*enumerate(SHARP_NOTE_NAMES), *enumerate(FLAT_NOTE_NAMES)]
    spellings += [(pc, name) for name, pc in _EXTRA_SPELLINGS.items()]
    for pc, name in spellings:
        lookup[name.lower()] = pc
        # ASCII aliases: C# / Db
        ascii_name = name.replace(SHARP, "#").replace(FLAT, "b")
        lookup[ascii_name.lower()] = pc
    return lookup


# Lower-cased spelling → pitch class
_NAME_TO_PC: dict[str, int] = _build_lookup()


def note_names(accidental_notation: str = "sharp") -> tuple[str, ...]:
    """Return the 12 printable note names for the given accidental notation.

    Raises:
        ValueError: If accidental_notation is not "sharp" or "flat".
    """
    if accidental_notation not in VALID_NOTATIONS:
        raise ValueError(
            f"Unknown accidental_notation {accidental_notation!r}, "
            f"valid options: {sorted(VALID_NOTATIONS)}"
        )
    return FLAT_NOTE_NAMES if accidental_notation == "flat" else SHARP_NOTE_NAMES


def note_to_pitch_class(name: str) -> int | None:
    """Map a note name to its pitch class (0–11), or None when unknown.

    Examples:
        >>> note_to_pitch_class("C♯")
        1
        >>> note_to_pitch_class("bb")
        10
        >>> note_to_pitch_class("H") is None
        True
    """
    if not name:
        return None
    return _NAME_TO_PC.get(name.strip().lower())


def pitch_class_to_note(pc: int, accidental_notation: str = "sharp") -> str:
    """Map a pitch class (any integer, reduced mod 12) to its printable name."""
    return note_names(accidental_notation)[pc % SEMITONES_PER_OCTAVE]


def midi_to_note_name(midi: int, accidental_notation: str = "sharp") -> str:
    """Return the note name with scientific octave, e.g. 60 → "C4", 61 → "C♯4".

    Raises:
        ValueError: If midi is outside [0, 127].
    """
    if not (MIDI_MIN <= midi <= MIDI_MAX):
        raise ValueError(f"MIDI number {midi} out of range [{MIDI_MIN}, {MIDI_MAX}]")
    octave = midi // SEMITONES_PER_OCTAVE - 1
    return f"{pitch_class_to_note(midi, accidental_notation)}{octave}"


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalize_pitch_classes(
    pitches: Iterable[int],
    accidental_notation: str = "sharp",
) -> tuple[str, ...]:
    """Reduce a pitch set to bass-relative, de-duplicated note names.

    The lowest pitch sets the bass. Every distinct pitch class is ordered by
    its upward chromatic distance from the bass pitch class, so the result
    only depends on the set of pitches, never on the order they arrived in.

    Args:
        pitches:             MIDI-style pitch numbers (duplicates allowed)
        accidental_notation: "sharp" or "flat" naming table

    Returns:
        Tuple of note names; element 0 is the bass.

    Raises:
        ValueError: If pitches is empty.

    Examples:
        >>> normalize_pitch_classes({64, 67, 72})
        ('E', 'G', 'C')
    """
    distinct = set(pitches)
    if not distinct:
        raise ValueError("Cannot normalize an empty pitch set")

    table = note_names(accidental_notation)
    bass_pc = min(distinct) % SEMITONES_PER_OCTAVE
    pitch_classes = {p % SEMITONES_PER_OCTAVE for p in distinct}
    ordered = sorted(pitch_classes, key=lambda pc: (pc - bass_pc) % SEMITONES_PER_OCTAVE)
    return tuple(table[pc] for pc in ordered)


def to_interval_vector(names: Sequence[str]) -> IntervalVector:
    """Compute the interval vector of note names relative to names[0].

    Unknown names degrade to pitch class 0 with a warning instead of aborting
    the search; an unknown root makes every interval relative to C.

    Raises:
        ValueError: If names is empty.
    """
    if not names:
        raise ValueError("Cannot compute intervals of an empty note sequence")

    pcs: list[int] = []
    for name in names:
        pc = note_to_pitch_class(name)
        if pc is None:
            logger.warning("Unknown note name %r in %s; treating it as pitch class 0", name, list(names))
            pc = 0
        pcs.append(pc)

    root = pcs[0]
    return IntervalVector.from_intervals((pc - root) % SEMITONES_PER_OCTAVE for pc in pcs)
