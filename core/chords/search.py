"""
core/chords/search.py — Candidate search over the chord tables.

find_candidates() runs three passes against each table (static, generated,
generated with omissions, in that order):

    1. direct         intervals of the full sequence from its first note
    2. bass removed   drop the bass, look the remainder up (and its
                      rotations) and write the bass under a slash: "C/D"
    3. rotation       every rotation of the full sequence, written over the
                      original bass: "C/E" for E-G-C

Results from all nine (table × pass) combinations are unioned and
de-duplicated by exact name, the first occurrence winning. Because tables
and passes are visited in priority order, the surviving ChordCandidate
records the most preferable way the name was reached.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from core.chords.generator import ChordMap
from core.chords.notes import to_interval_vector
from core.chords.repository import DEFAULT_REPOSITORY, ChordMapRepository
from core.chords.types import (
    PASS_BASS_REMOVED,
    PASS_DIRECT,
    PASS_ROTATION,
    ChordCandidate,
)

# ---------------------------------------------------------------------------
# Single-table lookups
# ---------------------------------------------------------------------------


def slash_chord(chord: str, bass: str) -> str:
    """Write chord over bass, e.g. ("Dm9", "c") → "Dm9/C"."""
    return f"{chord}/{bass.upper()}"


def lookup_names(note_names: Sequence[str], table: ChordMap) -> tuple[str, ...]:
    """Full chord names for a note sequence rooted on its first element."""
    if not note_names:
        return ()
    suffixes = table.get(to_interval_vector(note_names).key, ())
    return tuple(note_names[0] + suffix for suffix in suffixes)


def rotations(note_names: Sequence[str]) -> Iterator[tuple[str, ...]]:
    """Yield every non-trivial rotation: first i notes moved to the tail."""
    for i in range(1, len(note_names)):
        yield (*note_names[i:], *note_names[:i])


def find_with_rotation(note_names: Sequence[str], bass: str, table: ChordMap) -> list[str]:
    """Look up every rotation and write each hit over bass."""
    found: list[str] = []
    for rotated in rotations(note_names):
        found.extend(slash_chord(chord, bass) for chord in lookup_names(rotated, table))
    return found


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------


def _direct(note_names: Sequence[str], table: ChordMap) -> list[str]:
    return list(lookup_names(note_names, table))


def _bass_removed(note_names: Sequence[str], table: ChordMap) -> list[str]:
    bass = note_names[0]
    upper = note_names[1:]
    found = [slash_chord(chord, bass) for chord in lookup_names(upper, table)]
    found.extend(find_with_rotation(upper, bass, table))
    return found


def _rotation(note_names: Sequence[str], table: ChordMap) -> list[str]:
    return find_with_rotation(note_names, note_names[0], table)


_PASSES = (
    (PASS_DIRECT, _direct),
    (PASS_BASS_REMOVED, _bass_removed),
    (PASS_ROTATION, _rotation),
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def find_candidates(
    note_names: Sequence[str],
    repository: ChordMapRepository = DEFAULT_REPOSITORY,
) -> tuple[ChordCandidate, ...]:
    """Collect every chord name that spells the given notes.

    Args:
        note_names: Bass-first note names, as returned by
                    normalize_pitch_classes()
        repository: Chord tables to consult

    Returns:
        Unique candidates in discovery order (table priority, then pass
        order). Empty when note_names is empty or nothing matches.

    Examples:
        >>> [c.name for c in find_candidates(("E", "G", "C"))][:2]
        ['Em(♯5)', 'C/E']
    """
    if not note_names:
        return ()

    seen: dict[str, ChordCandidate] = {}
    for source, table in repository.tables():
        for search_pass, run in _PASSES:
            for name in run(note_names, table):
                if name not in seen:
                    seen[name] = ChordCandidate(name=name, source=source, search_pass=search_pass)
    return tuple(seen.values())
